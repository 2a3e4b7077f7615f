"""
Integration tests for the /api/users directory endpoints
"""

from factories import auth_headers


class TestUsersEndpoint:

    def test_admin_lists_users(self, client, admin, employee, admin_headers):
        response = client.get('/api/users', headers=admin_headers)

        assert response.status_code == 200
        assert {u['id'] for u in response.get_json()['users']} == {'admin-1', 'user-1'}

    def test_employee_cannot_list_users(self, client, employee_headers):
        response = client.get('/api/users', headers=employee_headers)

        assert response.status_code == 403
        assert response.get_json()['error'] == 'Insufficient permissions'

    def test_admin_claim_without_directory_record_is_enough(self, client, employee):
        response = client.get('/api/users', headers=auth_headers('bootstrap', role=None, roles=['admin']))

        assert response.status_code == 200

    def test_directory_role_wins_over_token_claim(self, client, employee):
        response = client.get('/api/users', headers=auth_headers(employee.id, 'admin'))

        assert response.status_code == 403

    def test_create_user(self, client, admin_headers):
        response = client.post('/api/users', json={
            'id': 'sub-42', 'email': 'ana@tienda.com', 'name': 'Ana', 'role': 'employee'
        }, headers=admin_headers)

        assert response.status_code == 201
        user = response.get_json()['user']
        assert user['id'] == 'sub-42'
        assert user['isActive'] is True
        assert user['lastLogin'] is None

    def test_create_user_duplicate_email(self, client, admin, admin_headers):
        response = client.post('/api/users', json={
            'email': admin.email, 'name': 'Otro'
        }, headers=admin_headers)

        assert response.status_code == 400

    def test_update_user_to_taken_email(self, client, admin, employee, admin_headers):
        response = client.put(f'/api/users/{employee.id}', json={'email': admin.email}, headers=admin_headers)

        assert response.status_code == 400
        users = client.get('/api/users', headers=admin_headers).get_json()['users']
        assert {u['id']: u['email'] for u in users}[employee.id] == employee.email

    def test_update_user_keeping_own_email(self, client, employee, admin_headers):
        response = client.put(f'/api/users/{employee.id}', json={'email': employee.email, 'name': 'Juan'}, headers=admin_headers)

        assert response.status_code == 200
        assert response.get_json()['user']['name'] == 'Juan'

    def test_update_and_delete_user(self, client, employee, admin_headers):
        response = client.put(f'/api/users/{employee.id}', json={'role': 'admin'}, headers=admin_headers)
        assert response.status_code == 200
        assert response.get_json()['user']['role'] == 'admin'

        response = client.delete(f'/api/users/{employee.id}', headers=admin_headers)
        assert response.status_code == 200

        response = client.delete(f'/api/users/{employee.id}', headers=admin_headers)
        assert response.status_code == 404

    def test_deactivated_user_is_denied(self, client, employee, employee_headers, admin_headers):
        client.put(f'/api/users/{employee.id}', json={'isActive': False}, headers=admin_headers)

        response = client.get('/api/movements', headers=employee_headers)

        assert response.status_code == 403
