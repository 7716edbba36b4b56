"""
Tests for the admin bootstrap script.
"""
from create_admin import create_admin


class TestCreateAdmin:

    def test_creates_admin_who_can_log_in(self, client, db_session):
        user, created = create_admin(db_session, "Root", "root@example.com", "9876543210", "rootpass")
        assert created is True
        assert user.role == "admin"
        assert user.contact == 9876543210

        response = client.post("/api/login", json={"email": "root@example.com", "password": "rootpass"})
        assert response.status_code == 200
        assert response.json()["user"]["role"] == "admin"

    def test_existing_email_is_left_alone(self, db_session, student_user):
        user, created = create_admin(db_session, "Root", "student@example.com", "9876543210", "rootpass")
        assert created is False
        assert user.id == student_user.id
        assert user.role == "student"
