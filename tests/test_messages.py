from user_manager import messages
from user_manager.models import AuthOutcome, DeleteOutcome, RegisterOutcome, User


def test_register_messages():
    assert messages.format_register(RegisterOutcome.registered) == "User registration successful!"
    assert messages.format_register(RegisterOutcome.already_exists) == (
        "Error: User with this username already exists."
    )


def test_login_failure_message_does_not_reveal_which_field_was_wrong():
    assert messages.format_login(AuthOutcome.authenticated, username="alice") == "Login successful! Welcome, alice."
    assert messages.format_login(AuthOutcome.rejected, username="alice") == (
        "Login failed. Invalid username or password."
    )


def test_user_list_empty_and_non_empty():
    assert messages.format_user_list([]) == ["No users registered in the system."]
    assert messages.format_user_list(["b", "a"]) == ["--- Registered Users ---", "- b", "- a"]


def test_search_and_delete_messages():
    assert messages.format_search(User(username="alice", password="pw")) == "User found: alice"
    assert messages.format_search(None) == "User not found."
    assert messages.format_delete(DeleteOutcome.deleted, username="alice") == "User 'alice' deleted successfully."
    assert messages.format_delete(DeleteOutcome.not_found, username="alice") == "User not found. Could not delete."
