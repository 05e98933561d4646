"""Tests persistance SQLite — store, reprise de session, erreurs."""
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from invite_builder.catalog import get_template
from invite_builder.editor.session import EditorSession
from invite_builder.errors import InvitationNotFoundError, SlugConflictError, StorageError
from invite_builder.storage.store import InvitationStore, SqlInvitationStore


@pytest.fixture
def store(session_factory):
    return SqlInvitationStore(session_factory)


def test_store_satisfies_protocol(store):
    assert isinstance(store, InvitationStore)


def test_create_and_get(store):
    created = store.create_invitation(
        "modern-elegance",
        title="Ana & Budi",
        customization={"colors": {"primary": "#fff"}},
        content={"heroSection": {"coupleNames": ["Ana", "Budi"]}},
    )
    loaded = store.get_invitation(created.invitation_id)

    assert loaded.template_id == "modern-elegance"
    assert loaded.title == "Ana & Budi"
    assert loaded.status == "draft"
    assert loaded.customization == {"colors": {"primary": "#fff"}}
    assert loaded.content["heroSection"]["coupleNames"] == ["Ana", "Budi"]


def test_save_overwrites_pair(store):
    created = store.create_invitation("modern-elegance")
    store.save_invitation(created.invitation_id, {"sections": [{"id": "story", "isVisible": False}]}, {"x": 1})

    loaded = store.get_invitation(created.invitation_id)
    assert loaded.customization == {"sections": [{"id": "story", "isVisible": False}]}
    assert loaded.content == {"x": 1}
    assert loaded.updated_at >= created.updated_at


def test_unknown_invitation(store):
    with pytest.raises(InvitationNotFoundError):
        store.get_invitation("inexistante")
    with pytest.raises(InvitationNotFoundError):
        store.save_invitation("inexistante", {}, {})



def test_duplicate_slug_raises_conflict(store):
    store.create_invitation("modern-elegance", slug="ana-budi")
    with pytest.raises(SlugConflictError) as exc:
        store.create_invitation("romantic-garden", slug="ana-budi")
    assert exc.value.slug == "ana-budi"
    assert isinstance(exc.value, StorageError)

def test_sqlalchemy_errors_wrapped():
    factory = MagicMock()
    factory.return_value.__enter__.return_value.get.side_effect = OperationalError("SELECT", {}, Exception("locked"))
    store = SqlInvitationStore(factory)

    with pytest.raises(StorageError):
        store.get_invitation("inv-1")


def test_session_round_trip_through_sqlite(store):
    created = store.create_invitation("romantic-garden")
    template = get_template("romantic-garden")

    session = EditorSession(store=store)
    session.load(created.invitation_id, template=template)
    session.update_customization({"colors": {"primary": "#000000"}})
    session.set_section_visibility("map", True)
    assert session.save().ok

    resumed = EditorSession(store=store)
    resumed.load(created.invitation_id, template=template)

    assert resumed.resolved_config().colors.primary == "#000000"
    assert "map" in [s.id for s in resumed.visible_sections()]
    assert resumed.is_dirty is False
    assert len(resumed.history) == 1
