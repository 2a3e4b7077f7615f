"""
Unit tests for role based permissions
"""

import pytest

from inventory_app.models import UserRole
from inventory_app.permissions import can
from factories import make_user


class TestCan:

    @pytest.mark.parametrize('action,resource', [
        ('create', 'product'), ('delete', 'product'), ('read', 'dashboard'),
        ('create', 'user'), ('delete', 'user'), ('create', 'movement'), ('read', 'report'),
    ])
    def test_admin_can_everything(self, action, resource):
        assert can(make_user(role=UserRole.ADMIN), action, resource)

    @pytest.mark.parametrize('action,resource', [
        ('create', 'product'), ('read', 'product'), ('update', 'product'),
        ('read', 'dashboard'), ('create', 'movement'), ('read', 'movement'), ('read', 'report'),
    ])
    def test_employee_allowed(self, action, resource):
        assert can(make_user(), action, resource)

    @pytest.mark.parametrize('action,resource', [
        ('delete', 'product'), ('read', 'user'), ('create', 'user'), ('delete', 'user'),
    ])
    def test_employee_denied(self, action, resource):
        assert not can(make_user(), action, resource)

    def test_role_values_accepted(self):
        assert can('admin', 'delete', 'product')
        assert can(UserRole.EMPLOYEE, 'read', 'movement')

    def test_unknown_subjects_denied(self):
        assert not can(None, 'read', 'product')
        assert not can('guest', 'read', 'product')

    def test_inactive_user_denied(self):
        assert not can(make_user(role=UserRole.ADMIN, is_active=False), 'read', 'product')
