"""Тесты выбора ключа группы."""

from __future__ import annotations

from baydesk.grouping.selector import select_key


def test_shared_candidate_wins() -> None:
    index = {"web-1": 1, "web": 2}
    assert select_key("web-1", ("web-1", "web"), index) == "web"


def test_falls_back_to_label_without_shared_candidates() -> None:
    index = {"api-1": 1, "api": 1}
    assert select_key("api-1", ("api-1", "api"), index) == "api-1"


def test_higher_count_beats_longer_candidate() -> None:
    index = {"db-replica-1": 1, "db-replica": 2, "db": 3}
    assert select_key("db-replica-1", ("db-replica-1", "db-replica", "db"), index) == "db"


def test_equal_count_prefers_longer_candidate() -> None:
    index = {"a-b-1": 1, "a-b": 2, "a": 2}
    assert select_key("a-b-1", ("a-b-1", "a-b", "a"), index) == "a-b"


def test_full_tie_keeps_generation_order() -> None:
    index = {"xa": 2, "xb": 2}
    assert select_key("x", ("xa", "xb"), index) == "xa"
    assert select_key("x", ("xb", "xa"), index) == "xb"


def test_unknown_candidates_are_ignored() -> None:
    assert select_key("solo", ("solo", "so"), {}) == "solo"
