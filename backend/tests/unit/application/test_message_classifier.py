"""
Unit tests for Telegram message classification.
"""

import pytest

from filerelay.application.message_classifier import classify_message, is_service_message
from filerelay.domain.errors import ValidationError


def _media(file_id="abc", unique_id="u1", **extra):
    media = {"file_id": file_id, "file_unique_id": unique_id, "file_size": 1024}
    media.update(extra)
    return media


def test_document_is_classified():
    message = {
        "message_id": 1,
        "chat": {"id": 5},
        "document": _media(file_name="report.pdf", mime_type="application/pdf"),
    }

    descriptor = classify_message(message, "tok")

    assert descriptor.file_id == "abc"
    assert descriptor.unique_id == "u1"
    assert descriptor.name == "report.pdf"
    assert descriptor.mime == "application/pdf"
    assert descriptor.size == 1024
    assert descriptor.token == "tok"


def test_video_is_classified():
    message = {"video": _media(unique_id="v1", mime_type="video/mp4")}

    descriptor = classify_message(message, "tok")

    assert descriptor.unique_id == "v1"
    assert descriptor.name is None
    assert descriptor.mime == "video/mp4"


def test_animation_wins_over_its_document_copy():
    message = {
        "animation": _media(unique_id="anim", file_name="cat.mp4"),
        "document": _media(unique_id="doc"),
    }

    assert classify_message(message, "tok").unique_id == "anim"


def test_missing_size_defaults_to_zero():
    message = {"document": {"file_id": "abc", "file_unique_id": "u1"}}

    assert classify_message(message, "tok").size == 0


@pytest.mark.parametrize(
    "message",
    [
        {"text": "hello"},
        {"photo": [_media()]},
        {"sticker": _media()},
        {"audio": _media()},
        {},
    ],
)
def test_non_files_raise_validation_error(message):
    with pytest.raises(ValidationError):
        classify_message(message, "tok")


def test_malformed_attachment_raises_validation_error():
    with pytest.raises(ValidationError):
        classify_message({"document": {"file_id": "abc"}}, "tok")


def test_service_message_detection():
    assert is_service_message({"new_chat_members": [{"id": 1}]})
    assert is_service_message({"pinned_message": {"message_id": 3}})
    assert not is_service_message({"text": "hi"})
