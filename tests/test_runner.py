from __future__ import annotations

import subprocess

import pytest

from fakes import (
    JPEG_BYTES,
    PNG_BYTES,
    fake_converter,
    image_part,
    make_genai_client,
    make_response,
    text_part,
)
from spritegen import postprocess
from spritegen.catalog import Item
from spritegen.extract import NoImageReturnedError
from spritegen.runner import STATUS_DEGRADED, STATUS_FAILED, STATUS_SAVED, generate_sprites

CATALOG = (Item("item1", "red bucket hat"), Item("item2", "striped wool scarf"))


@pytest.fixture
def converter_calls(monkeypatch):
    calls: list[list[str]] = []
    monkeypatch.setattr(postprocess.subprocess, "run", fake_converter(calls))
    return calls


def test_generate_sprites_processes_catalog_in_order(tmp_path, converter_calls):
    client = make_genai_client(
        make_response(text_part(), image_part(PNG_BYTES)),
        make_response(image_part(JPEG_BYTES, mime_type="image/jpeg")),
    )
    lines: list[str] = []

    results = generate_sprites(client, CATALOG, output_dir=tmp_path, report=lines.append)

    assert [result.item_id for result in results] == ["item1", "item2"]
    assert [result.status for result in results] == [STATUS_SAVED, STATUS_SAVED]
    assert sorted(path.name for path in tmp_path.iterdir()) == ["item1.png", "item2.png"]
    assert [line for line in lines if line.startswith("Saved: ")] == [
        f"Saved: {tmp_path / 'item1.png'}",
        f"Saved: {tmp_path / 'item2.png'}",
    ]
    assert lines[-1] == "\nDone. Generated 2 images."

    calls = client.models.calls
    assert [call["model"] for call in calls] == ["gemini-3-pro-image-preview"] * 2
    assert "red bucket hat" in calls[0]["contents"]
    assert "striped wool scarf" in calls[1]["contents"]
    config = calls[0]["config"]
    assert config.response_modalities == ["IMAGE"]
    assert config.image_config.aspect_ratio == "1:1"
    assert config.image_config.image_size == "1K"


def test_missing_image_aborts_without_writing(tmp_path, converter_calls):
    client = make_genai_client(make_response(text_part()), make_response(image_part(PNG_BYTES)))

    with pytest.raises(NoImageReturnedError) as excinfo:
        generate_sprites(client, CATALOG, output_dir=tmp_path, report=lambda line: None)

    assert excinfo.value.item_id == "item1"
    assert list(tmp_path.iterdir()) == []
    assert len(client.models.calls) == 1
    assert converter_calls == []


def test_service_error_propagates_and_stops_the_batch(tmp_path, converter_calls):
    client = make_genai_client(RuntimeError("quota exceeded"), make_response(image_part(PNG_BYTES)))

    with pytest.raises(RuntimeError, match="quota exceeded"):
        generate_sprites(client, CATALOG, output_dir=tmp_path, report=lambda line: None)

    assert len(client.models.calls) == 1
    assert list(tmp_path.iterdir()) == []


def test_continue_on_error_records_failures(tmp_path, converter_calls):
    client = make_genai_client(RuntimeError("network down"), make_response(image_part(PNG_BYTES)))
    lines: list[str] = []

    results = generate_sprites(
        client,
        CATALOG,
        output_dir=tmp_path,
        continue_on_error=True,
        report=lines.append,
    )

    assert [result.status for result in results] == [STATUS_FAILED, STATUS_SAVED]
    assert results[0].error == "network down"
    assert results[0].path is None
    assert [path.name for path in tmp_path.iterdir()] == ["item2.png"]
    assert lines[-1] == "\nDone. Generated 1 images."


def test_failed_conversion_marks_item_degraded(tmp_path, monkeypatch):
    def failing(cmd, check, capture_output):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(postprocess.subprocess, "run", failing)
    client = make_genai_client(make_response(image_part(JPEG_BYTES, mime_type="image/jpeg")))

    results = generate_sprites(
        client, CATALOG[:1], output_dir=tmp_path, report=lambda line: None
    )

    assert results[0].status == STATUS_DEGRADED
    assert results[0].ok
    assert (tmp_path / "item1.png").read_bytes() == JPEG_BYTES


def test_slash_in_media_subtype_still_saves_png(tmp_path, converter_calls):
    client = make_genai_client(make_response(image_part(PNG_BYTES, mime_type="image/svg/xml")))

    results = generate_sprites(client, CATALOG[:1], output_dir=tmp_path, report=lambda line: None)

    assert results[0].status == STATUS_SAVED
    assert [path.name for path in tmp_path.iterdir()] == ["item1.png"]
