"""
Key-value entry model - the single table behind the SQL ledger store
"""

from datetime import datetime
from inventory_app.database import db


class KeyValueEntry(db.Model):
    """One JSON document addressed by key (product:1, movement:1:..., user:...)"""
    __tablename__ = 'kv_store'

    key = db.Column(db.String(255), primary_key=True)
    value = db.Column(db.JSON, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f'<KeyValueEntry {self.key}>'
