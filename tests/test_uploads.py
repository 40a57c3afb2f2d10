"""Tests for the image upload endpoint and static file serving."""

import inspect

import pytest
from fastapi import HTTPException

from travel_guide_api.app.api.endpoints.uploads import upload_filename, upload_image


def test_upload_stores_file_under_original_name(client, app_settings):
    resp = client.post("/upload", files={"image": ("lisbon.jpg", b"jpeg-bytes", "image/jpeg")})
    assert resp.status_code == 200
    assert resp.text == "File uploaded successfully"
    assert (app_settings.images_path / "lisbon.jpg").read_bytes() == b"jpeg-bytes"


def test_uploaded_file_is_served_statically(client):
    client.post("/upload", files={"image": ("rome.png", b"png-bytes", "image/png")})
    resp = client.get("/images/rome.png")
    assert resp.status_code == 200
    assert resp.content == b"png-bytes"


def test_upload_overwrites_existing_file(client, app_settings):
    client.post("/upload", files={"image": ("same.jpg", b"first", "image/jpeg")})
    client.post("/upload", files={"image": ("same.jpg", b"second", "image/jpeg")})
    assert (app_settings.images_path / "same.jpg").read_bytes() == b"second"


def test_upload_stays_inside_images_directory(client, app_settings):
    resp = client.post("/upload", files={"image": ("../escape.jpg", b"data", "image/jpeg")})
    assert resp.status_code == 200
    assert (app_settings.images_path / "escape.jpg").exists()
    assert not (app_settings.public_path / "escape.jpg").exists()


def test_upload_without_file_is_malformed(client):
    resp = client.post("/upload", data={"other": "value"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Malformed request"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("photo.jpg", "photo.jpg"),
        ("dir/photo.jpg", "photo.jpg"),
        ("C:\\Users\\me\\photo.jpg", "photo.jpg"),
        ("my photo (1).JPG", "my photo (1).JPG"),
    ],
)
def test_upload_filename(raw, expected):
    assert upload_filename(raw) == expected


@pytest.mark.parametrize("raw", ["", ".", "..", "dir/.."])
def test_upload_filename_rejects_empty_names(raw):
    with pytest.raises(HTTPException) as excinfo:
        upload_filename(raw)
    assert excinfo.value.status_code == 400


def test_upload_handler_runs_in_threadpool():
    assert not inspect.iscoroutinefunction(upload_image)


def test_upload_large_file_is_written_completely(client, app_settings):
    content = bytes(range(256)) * 8192  # 2 MiB, larger than the spool threshold
    resp = client.post("/upload", files={"image": ("big.bin", content, "application/octet-stream")})
    assert resp.status_code == 200
    assert (app_settings.images_path / "big.bin").read_bytes() == content
