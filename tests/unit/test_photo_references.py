"""Unit tests for photo reference normalisation."""
import pytest

from photo_visibility.application.references import ById, ByEntity, as_photo_ref, disassemble_photo
from photo_visibility.infrastructure.database import Photo


@pytest.mark.parametrize("photo_id", [42, "42"])
def test_bare_id_has_no_photo(photo_id):
    assert disassemble_photo(photo_id) == (photo_id, None)
    assert as_photo_ref(photo_id) == ById(photo_id)


def test_photo_model_is_split_into_id_and_photo():
    photo = Photo(id=42, owner_id=9)

    photo_id, result = disassemble_photo(photo)

    assert photo_id == 42
    assert result is photo
    assert as_photo_ref(photo) == ByEntity(photo)


def test_references_pass_through():
    photo = Photo(id=42)
    by_entity = ByEntity(photo)
    by_id = ById(7)

    assert as_photo_ref(by_entity) is by_entity
    assert as_photo_ref(by_id) is by_id
    assert disassemble_photo(by_entity) == (42, photo)
    assert disassemble_photo(by_id) == (7, None)
