import pytest

from taskdesk.status import (
    FILTER_ORDER,
    FORM_ORDER,
    TaskStatus,
    status_from_db,
    status_from_label,
)


@pytest.mark.parametrize(
    "stored, expected",
    [
        ("pendente", TaskStatus.PENDING),
        ("concluida", TaskStatus.COMPLETED),
        ("em_andamento", TaskStatus.IN_PROGRESS),
    ],
)
def test_database_values_match_stored_text(stored, expected):
    status = status_from_db(stored)
    assert status is expected
    assert status.value == stored


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Pendente", TaskStatus.PENDING),
        ("Concluída", TaskStatus.COMPLETED),
        ("Em andamento", TaskStatus.IN_PROGRESS),
    ],
)
def test_labels(label, expected):
    status = status_from_label(label)
    assert status is expected
    assert status.label == label


@pytest.mark.parametrize("status", list(TaskStatus))
def test_db_round_trip(status):
    assert status_from_db(status.value) is status


@pytest.mark.parametrize("status", list(TaskStatus))
def test_label_round_trip(status):
    assert status_from_label(status.label) is status


def test_unknown_db_value_is_in_progress():
    assert status_from_db("whatever") is TaskStatus.IN_PROGRESS
    assert status_from_db("") is TaskStatus.IN_PROGRESS


def test_unknown_label_raises():
    with pytest.raises(ValueError):
        status_from_label("Todas")


def test_orders_cover_every_status_once():
    form_labels = [status_from_label(s.label) for s in FORM_ORDER]
    filter_values = [status_from_db(s.value) for s in FILTER_ORDER]
    assert form_labels == [
        TaskStatus.PENDING,
        TaskStatus.COMPLETED,
        TaskStatus.IN_PROGRESS,
    ]
    assert filter_values == [
        TaskStatus.PENDING,
        TaskStatus.IN_PROGRESS,
        TaskStatus.COMPLETED,
    ]
    assert len(set(form_labels)) == len(TaskStatus)
    assert len(set(filter_values)) == len(TaskStatus)