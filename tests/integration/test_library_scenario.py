"""
Test d'intégration: scenario complet du catalogue.

Démarrage sur un catalogue vide, ajout d'Inception, liste, sortie avec
sauvegarde, puis relecture dans un stockage neuf.
"""

from dvd_library.adapters.cli.controller import DvdLibraryController
from dvd_library.adapters.cli.view import DvdLibraryView
from dvd_library.core.entities.dvd import DVD_HEADERS, Dvd
from dvd_library.infrastructure.persistence import (
    DvdLibraryStorage,
    DvdSerializer,
    FileDvdLibraryDao,
)


def test_add_list_exit_reload(tmp_path, make_user_io, inception):
    library_file = tmp_path / "DVDLibrary.txt"
    library_file.write_text("", encoding="utf-8")

    storage = DvdLibraryStorage()
    dao = FileDvdLibraryDao(storage, DvdSerializer(), library_file)
    user_io = make_user_io(
        "1", "Inception", "2010", "C. Nolan", "WB", "PG-13", "9/10",
        "4",
        "6",
    )

    DvdLibraryController(DvdLibraryView(user_io), dao).run()

    # La liste contient l'en-tête et exactement une ligne de DVD
    listing = next(msg for msg in user_io.messages if msg.startswith(Dvd.header_row()))
    lines = listing.splitlines()
    assert lines[0] == Dvd.header_row()
    for label in DVD_HEADERS:
        assert label in lines[0]
    rows = [line for line in lines if not set(line) <= {"=", "-"}][1:]
    assert rows == [str(inception)]

    # La sortie a sauvegardé le catalogue
    assert library_file.read_text(encoding="utf-8") == (
        "Inception::2010::PG-13::C. Nolan::WB::9/10\n"
    )

    fresh = DvdLibraryStorage()
    assert FileDvdLibraryDao(fresh, DvdSerializer(), library_file).load() is True
    assert fresh.all() == [inception]


def test_remove_edit_get_then_reload(tmp_path, make_user_io, inception, alien):
    library_file = tmp_path / "DVDLibrary.txt"
    serializer = DvdSerializer()
    library_file.write_text(
        serializer.encode(inception) + "\n" + serializer.encode(alien) + "\n",
        encoding="utf-8",
    )

    storage = DvdLibraryStorage()
    dao = FileDvdLibraryDao(storage, serializer, library_file)
    user_io = make_user_io(
        "2", "Alien",
        "2", "Alien",
        "3", "Inception", "Inception", "2010", "C. Nolan", "WB", "PG-13", "10/10",
        "5", "Inception",
        "6",
    )

    DvdLibraryController(DvdLibraryView(user_io), dao).run()

    assert "Failed to remove Alien: DVD does not exist in storage" in user_io.messages
    fresh = DvdLibraryStorage()
    FileDvdLibraryDao(fresh, serializer, library_file).load()
    assert [dvd.title for dvd in fresh.all()] == ["Inception"]
    assert fresh.get("Inception").user_rating_and_note == "10/10"
