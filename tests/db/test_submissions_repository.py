from __future__ import annotations

import pytest

from spicerack.db.submissions import approve_submission, list_submissions, record_submission
from spicerack.errors import NotFoundError


def test_record_pending_submission():
    submission = record_submission("Ghost Pepper", "G")

    assert submission.status == "pending"
    assert submission.approved_at is None
    assert submission.submitted_at.tzinfo is not None
    assert list_submissions() == [submission]


def test_record_approved_submission_sets_approval_time():
    submission = record_submission("Kala Namak", "K", "approved")

    assert submission.status == "approved"
    assert submission.approved_at is not None


def test_recording_same_name_updates_existing_row():
    record_submission("Ghost Pepper", "G")
    record_submission("Ghost Pepper", "P", "rejected")

    submissions = list_submissions()
    assert len(submissions) == 1
    assert submissions[0].category == "P"
    assert submissions[0].status == "rejected"


def test_list_is_ordered_by_submission():
    record_submission("Sumac Blend", "S")
    record_submission("Amchur Mix", "A")

    assert [submission.name for submission in list_submissions()] == ["Sumac Blend", "Amchur Mix"]


def test_approve_submission():
    record_submission("Ghost Pepper", "G")

    approved = approve_submission("Ghost Pepper")

    assert approved.status == "approved"
    assert approved.approved_at is not None


def test_approve_unknown_submission_raises():
    with pytest.raises(NotFoundError):
        approve_submission("Nothing")
