"""
Unit tests for the records and the synchronous type demonstrations.
"""

import dataclasses

import pytest

from typetour import Admin, Box, Color, Direction, Person, Point, ReadonlyUser, Role, Status, User
from typetour import types_demo


@pytest.mark.unit
class TestRecords:
    """Test the example record types."""

    def test_user_age_is_optional(self):
        user = User(id=1, name="Alice", email="alice@example.com")
        assert user.age is None

    def test_admin_extends_user(self):
        admin = Admin(id=2, name="Bob", email="bob@example.com",
                      role=Role.SUPERADMIN, permissions=["read"])

        assert isinstance(admin, User)
        assert admin.role is Role.SUPERADMIN
        assert admin.permissions == ["read"]

    def test_admin_defaults_do_not_share_permissions(self):
        first = Admin(id=1, name="A", email="a@example.com")
        second = Admin(id=2, name="B", email="b@example.com")
        first.permissions.append("write")

        assert first.role is Role.ADMIN
        assert second.permissions == []

    def test_role_labels(self):
        assert [role.value for role in Role] == ["admin", "superadmin", "Receptionist"]

    def test_readonly_records_reject_assignment(self):
        user = ReadonlyUser(id=1, name="Dana")
        point = Point(x=1, y=2)

        with pytest.raises(dataclasses.FrozenInstanceError):
            user.name = "Other"
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.x = 5

    def test_person_combines_both_shapes(self):
        person = Person(name="Charlie", age=35)

        assert person.name == "Charlie"
        assert person.age == 35
        assert [f.name for f in dataclasses.fields(person)] == ["name", "age"]

    def test_box_get_and_set(self):
        box = Box(42, Color.GREEN)
        assert box.get_value() == 42

        box.set_value(7)
        assert box.get_value() == 7
        assert box.value == 7
        assert "GREEN" in repr(box)

    def test_enum_values(self):
        assert Color.RED.value == "RED"
        assert Direction.UP.value == 1
        assert Direction.RIGHT.value == 4
        assert Status("completed") is Status.COMPLETED


@pytest.mark.unit
class TestTypeDemos:
    """Test the demonstration functions."""

    def test_get_first_element(self):
        assert types_demo.get_first_element([1, 2, 3]) == 1
        assert types_demo.get_first_element(["only"]) == "only"

    def test_get_first_element_empty(self):
        assert types_demo.get_first_element([]) is None

    def test_swap_pair(self):
        assert types_demo.swap_pair((5, "ten")) == ("ten", 5)

    def test_log_user_by_id_accepts_subtypes(self, capsys):
        admin = Admin(id=9, name="Eve", email="eve@example.com")

        assert types_demo.log_user_by_id(admin) is admin
        assert "User ID: 9" in capsys.readouterr().out

    def test_handle_user_prints_age_only_when_set(self, capsys):
        types_demo.handle_user(User(id=1, name="Alice", email="alice@example.com"))
        out = capsys.readouterr().out
        assert "User: Alice (alice@example.com)" in out
        assert "Age" not in out

        types_demo.handle_user(User(id=1, name="Alice", email="alice@example.com", age=40))
        assert "Age: 40" in capsys.readouterr().out

    def test_handle_admin(self, capsys):
        admin = Admin(id=2, name="Bob", email="bob@example.com",
                      permissions=["read", "write", "delete"])
        types_demo.handle_admin(admin)

        out = capsys.readouterr().out
        assert "Admin: Bob, Role: admin" in out
        assert "Permissions: read, write, delete" in out

    def test_process_id_accepts_int_and_str(self, capsys):
        types_demo.process_id(123)
        types_demo.process_id("ABC-789")

        out = capsys.readouterr().out
        assert "Processing ID: 123" in out
        assert "Processing ID: ABC-789" in out

    def test_update_status(self, capsys):
        types_demo.update_status(Status.PENDING)
        assert "Status updated to: pending" in capsys.readouterr().out

    def test_describe_person(self):
        assert types_demo.describe_person(Person(name="Charlie", age=35)) == "Charlie is 35 years old"

    def test_readonly_types(self, capsys):
        assert types_demo.readonly_types() is True
        assert "Cannot assign to 'name' of ReadonlyUser" in capsys.readouterr().out

    def test_basic_and_array_types(self, capsys):
        types_demo.basic_types()
        types_demo.array_types()

        out = capsys.readouterr().out
        assert "Name: Ahmed, Age: 33, Student: True" in out
        assert "Tuple: ('test', 42, True)" in out
