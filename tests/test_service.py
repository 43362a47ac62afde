import pytest

from errors import AdminAlreadyExists, DuplicateCredential, NotFound, Unauthorized
from schemas import Complaint, User


def test_login_known_and_unknown(service):
    assert service.login("secret1").id == "1"
    with pytest.raises(NotFound):
        service.login("nope")


def test_register_resets_complaints(service):
    candidate = User(secret_code="new", name="New", complaints=[Complaint(id="x", title="t")])
    user = service.register_user(candidate)
    assert user.complaints == []
    assert service.list_own_complaints("new") == []


def test_register_conflicts(service):
    with pytest.raises(DuplicateCredential):
        service.register_user(User(secret_code="secret1"))
    with pytest.raises(AdminAlreadyExists):
        service.register_user(User(secret_code="other", role="admin"))


def test_submit_forces_open_state(service):
    stored = service.submit_complaint("secret1", Complaint(id="c1", title="Leak", resolved=True))
    assert stored.resolved is False
    assert service.view_complaint("secret1", "c1").resolved is False


def test_submit_requires_credential(service):
    with pytest.raises(Unauthorized):
        service.submit_complaint(None, Complaint(id="c1", title="Leak"))


def test_list_own_only_returns_callers_complaints(service):
    service.register_user(User(secret_code="secret3", name="Sam"))
    service.submit_complaint("secret1", Complaint(id="a", title="A"))
    service.submit_complaint("secret3", Complaint(id="b", title="B"))
    service.submit_complaint("secret1", Complaint(id="c", title="C"))
    assert [c.id for c in service.list_own_complaints("secret1")] == ["a", "c"]
    assert [c.id for c in service.list_own_complaints("secret3")] == ["b"]


def test_view_other_users_complaint_is_not_found(service):
    service.register_user(User(secret_code="secret3"))
    service.submit_complaint("secret3", Complaint(id="private", title="t"))
    with pytest.raises(NotFound):
        service.view_complaint("secret1", "private")


def test_list_all_requires_admin(service):
    with pytest.raises(Unauthorized):
        service.list_all_complaints("secret1")


def test_list_all_includes_every_complaint_once(service):
    service.register_user(User(secret_code="secret3", name="Sam"))
    service.submit_complaint("secret1", Complaint(id="a", title="A"))
    service.submit_complaint("secret3", Complaint(id="b", title="B"))
    service.submit_complaint("secret2", Complaint(id="c", title="C"))
    entries = service.list_all_complaints("secret2")
    assert sorted((e.user_id, e.complaint.id) for e in entries) == [("1", "a"), ("2", "c"), ("3", "b")]


def test_resolve_requires_admin(service):
    service.submit_complaint("secret1", Complaint(id="c1", title="t"))
    with pytest.raises(Unauthorized):
        service.resolve_complaint("secret1", "c1")
    assert service.view_complaint("secret1", "c1").resolved is False


def test_resolve_any_users_complaint(service):
    service.submit_complaint("secret1", Complaint(id="c1", title="t"))
    service.resolve_complaint("secret2", "c1")
    service.resolve_complaint("secret2", "c1")
    assert service.view_complaint("secret1", "c1").resolved is True
    assert service.list_all_complaints("secret2")[0].complaint.resolved is True


def test_resolve_unknown_id(service):
    with pytest.raises(NotFound):
        service.resolve_complaint("secret2", "missing")
