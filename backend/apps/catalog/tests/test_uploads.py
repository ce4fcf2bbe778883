import tempfile

from django.core.files.storage import FileSystemStorage
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.catalog.uploads import ProductImageStore, image_errors


def test_png_upload_is_accepted():
    upload = SimpleUploadedFile("pixel.png", b"\x89PNG data", content_type="image/png")
    assert image_errors(upload) == []


def test_extension_and_mime_type_must_both_be_images():
    renamed = SimpleUploadedFile("notes.png", b"text", content_type="text/plain")
    disguised = SimpleUploadedFile("notes.txt", b"text", content_type="image/png")
    assert image_errors(renamed)
    assert image_errors(disguised)


def test_oversized_upload_is_rejected(settings):
    settings.PRODUCT_IMAGE_MAX_BYTES = 4
    upload = SimpleUploadedFile("big.jpg", b"12345", content_type="image/jpeg")
    errors = image_errors(upload)
    assert len(errors) == 1
    assert "4 bytes" in errors[0]


def test_store_generates_unique_names_and_deletes():
    with tempfile.TemporaryDirectory() as root:
        store = ProductImageStore(storage=FileSystemStorage(location=root))
        first = store.save(SimpleUploadedFile("same.png", b"a", content_type="image/png"))
        second = store.save(SimpleUploadedFile("same.png", b"b", content_type="image/png"))
        assert first != second
        assert first.endswith(".png")
        assert store.storage.exists(first)
        store.delete(first)
        assert not store.storage.exists(first)
