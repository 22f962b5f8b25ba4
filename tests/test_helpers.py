from tierboard.helpers import UserRecord, parse_user_record, position_of, sort_by_xp


def test_parse_user_record_full():
    user = parse_user_record(
        "abc",
        {"xp": 1500, "level": 12, "hasMonarchTitle": True, "displayName": "Ana"},
    )
    assert user == UserRecord(
        id="abc", xp=1500, level=12, has_special_title=True, display_name="Ana",
    )

def test_parse_user_record_missing_fields():
    user = parse_user_record("abc", {})
    assert user.xp == 0
    assert user.level is None
    assert user.has_special_title is False
    assert user.display_name is None
    assert parse_user_record("abc", None).xp == 0  # deleted document

def test_parse_user_record_coerces_values():
    user = parse_user_record(7, {"xp": "250", "level": 3.0, "name": "Bo"})
    assert user.id == "7"
    assert user.xp == 250
    assert user.level == 3
    assert user.display_name == "Bo"
    assert parse_user_record("x", {"xp": "lots"}).xp == 0
    assert parse_user_record("x", {"hasMonarchTitle": "true"}).has_special_title is False

def test_sort_by_xp_keeps_tie_order():
    users = [UserRecord("a", 10), UserRecord("b", 50), UserRecord("c", 10)]
    assert [u.id for u in sort_by_xp(users)] == ["b", "a", "c"]

def test_position_of():
    users = [UserRecord("a", 10), UserRecord("b", 5)]
    assert position_of(users, "b") == 2
    assert position_of(users, "zz") == 0

def test_parse_user_record_non_finite_numbers():
    assert parse_user_record("x", {"xp": float("nan")}).xp == 0
    assert parse_user_record("x", {"xp": float("-inf")}).xp == 0
    assert parse_user_record("x", {"level": float("inf")}).level is None
    assert parse_user_record("x", {"level": float("nan"), "xp": 40.0}).xp == 40

def test_parse_user_record_display_name_must_be_text():
    assert parse_user_record("x", {"displayName": 42}).display_name is None
    assert parse_user_record("x", {"displayName": {"first": "Ana"}}).display_name is None
    assert parse_user_record("x", {"name": ["Bo"]}).display_name is None
    assert parse_user_record("x", {"displayName": "Ana"}).display_name == "Ana"
