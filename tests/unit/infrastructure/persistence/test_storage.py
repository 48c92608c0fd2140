"""
Tests pour DvdLibraryStorage (stockage mémoire indexé par titre).
"""

from dvd_library.core.entities.dvd import Dvd
from dvd_library.infrastructure.persistence.storage import DvdLibraryStorage


class TestDvdLibraryStorage:
    """Tests pour les opérations du stockage."""

    def test_new_storage_is_empty(self):
        storage = DvdLibraryStorage()
        assert storage.is_empty()
        assert storage.all() == []
        assert len(storage) == 0

    def test_add_then_get(self, inception):
        storage = DvdLibraryStorage()
        storage.add(inception)
        assert storage.get("Inception") is inception
        assert not storage.is_empty()

    def test_get_missing_returns_none(self):
        assert DvdLibraryStorage().get("Missing") is None

    def test_get_is_case_sensitive(self, inception):
        storage = DvdLibraryStorage([inception])
        assert storage.get("inception") is None

    def test_add_same_title_last_write_wins(self, inception):
        """Un second ajout avec le même titre remplace le premier."""
        storage = DvdLibraryStorage()
        storage.add(inception)
        replacement = Dvd(title="Inception", release_date="2011", user_rating_and_note="10/10")
        storage.add(replacement)

        assert storage.get("Inception") == replacement
        assert [dvd.title for dvd in storage.all()] == ["Inception"]

    def test_remove_existing_returns_true(self, inception):
        storage = DvdLibraryStorage([inception])
        assert storage.remove("Inception") is True
        assert storage.get("Inception") is None
        assert storage.is_empty()

    def test_remove_missing_returns_false(self):
        """Supprimer un titre absent ne leve pas d'erreur."""
        storage = DvdLibraryStorage()
        assert storage.remove("X") is False

    def test_all_returns_snapshot(self, inception, alien):
        """Modifier la liste retournée ne modifie pas le stockage."""
        storage = DvdLibraryStorage([inception, alien])
        snapshot = storage.all()
        snapshot.clear()
        assert len(storage) == 2

    def test_contains_and_iter(self, inception, alien):
        storage = DvdLibraryStorage([inception, alien])
        assert "Alien" in storage
        assert "Missing" not in storage
        assert {dvd.title for dvd in storage} == {"Inception", "Alien"}

    def test_clear(self, inception):
        storage = DvdLibraryStorage([inception])
        storage.clear()
        assert storage.is_empty()
