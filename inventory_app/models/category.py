"""
Category Model
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    color: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Category':
        return cls(id=str(data['id']), name=data.get('name', ''), color=data.get('color', ''))

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'color': self.color}
