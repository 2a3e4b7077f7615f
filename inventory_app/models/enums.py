"""
Model Enums
"""

from enum import Enum


class MovementType(Enum):
    ENTRADA = "entrada"
    SALIDA = "salida"


class UserRole(Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"
