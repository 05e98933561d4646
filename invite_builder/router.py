"""
Router FastAPI — endpoints invite_builder.

GET  /invite-builder/templates                   → catalogue (résumés)
GET  /invite-builder/templates/{template_id}      → template complet
POST /invite-builder/resolve                     → base + customization → config résolue + sections visibles
POST /invite-builder/invitations                 → crée une invitation
GET  /invite-builder/invitations/{invitation_id} → customization + content stockés
PUT  /invite-builder/invitations/{invitation_id} → sauvegarde customization + content
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .catalog import get_template, list_templates
from .core.design_system import generate_css_variables
from .errors import InvitationNotFoundError, SlugConflictError, StorageError, TemplateNotFoundError
from .resolution import merge_configs, select_sections
from .storage.store import SqlInvitationStore, StoredInvitation

log = logging.getLogger(__name__)

router = APIRouter(prefix="/invite-builder", tags=["invite_builder"])


class _CamelBody(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResolveRequest(_CamelBody):
    template_id: Optional[str] = None
    base_config: Optional[Dict[str, Any]] = None
    customization: Dict[str, Any] = Field(default_factory=dict)
    exclude_types: List[str] = Field(default_factory=list)


class InvitationCreate(_CamelBody):
    template_id: str
    title: str = ""
    slug: Optional[str] = None
    customization: Dict[str, Any] = Field(default_factory=dict)
    content: Dict[str, Any] = Field(default_factory=dict)


class InvitationSave(_CamelBody):
    customization: Dict[str, Any] = Field(default_factory=dict)
    content: Dict[str, Any] = Field(default_factory=dict)


def _template_or_404(template_id: str):
    try:
        return get_template(template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(404, str(e))


def get_store() -> SqlInvitationStore:
    return SqlInvitationStore()


def _invitation_json(inv: StoredInvitation) -> dict:
    return {
        "invitationId": inv.invitation_id,
        "templateId":   inv.template_id,
        "title":        inv.title,
        "slug":         inv.slug,
        "status":       inv.status,
        "customTheme":  inv.customization,
        "content":      inv.content,
        "updatedAt":    inv.updated_at.isoformat() if inv.updated_at else None,
    }


# ── Catalogue ────────────────────────────────────────────────────────────────

@router.get("/templates", summary="Liste les templates du catalogue")
def templates(category: Optional[str] = None) -> dict:
    return {"templates": [
        t.model_dump(by_alias=True, exclude={"base_config"})
        for t in list_templates(category)
    ]}


@router.get("/templates/{template_id}", summary="Template complet (config de base brute)")
def template_detail(template_id: str) -> dict:
    return _template_or_404(template_id).model_dump(by_alias=True)


# ── Résolution ───────────────────────────────────────────────────────────────

@router.post("/resolve", summary="Résout base + customization")
def resolve(req: ResolveRequest) -> dict:
    """
    Base = template du catalogue (templateId) ou config brute (baseConfig).
    Retourne la config résolue, les sections à rendre et les variables de thème.
    """
    base = req.base_config
    if req.template_id:
        base = _template_or_404(req.template_id).base_config

    config = merge_configs(base, req.customization)
    sections = select_sections(config, req.exclude_types)
    return {
        "config":       config.model_dump(by_alias=True),
        "sections":     [s.model_dump(by_alias=True) for s in sections],
        "cssVariables": generate_css_variables(config),
    }


# ── Invitations ──────────────────────────────────────────────────────────────

@router.post("/invitations", status_code=201, summary="Crée une invitation")
def create_invitation(body: InvitationCreate, store: SqlInvitationStore = Depends(get_store)) -> dict:
    _template_or_404(body.template_id)
    try:
        inv = store.create_invitation(
            body.template_id,
            title=body.title,
            slug=body.slug,
            customization=body.customization,
            content=body.content,
        )
    except SlugConflictError as e:
        raise HTTPException(409, str(e))
    except StorageError as e:
        log.warning("Création invitation échouée : %s", e)
        raise HTTPException(503, "Stockage indisponible")
    return _invitation_json(inv)


@router.get("/invitations/{invitation_id}", summary="Customization + content stockés")
def get_invitation(invitation_id: str, store: SqlInvitationStore = Depends(get_store)) -> dict:
    try:
        return _invitation_json(store.get_invitation(invitation_id))
    except InvitationNotFoundError as e:
        raise HTTPException(404, str(e))
    except StorageError as e:
        log.warning("Lecture invitation %s échouée : %s", invitation_id, e)
        raise HTTPException(503, "Stockage indisponible")


@router.put("/invitations/{invitation_id}", summary="Sauvegarde customization + content")
def save_invitation(invitation_id: str, body: InvitationSave, store: SqlInvitationStore = Depends(get_store)) -> dict:
    """Stocke l'override tel quel ; la config résolue n'est jamais persistée."""
    try:
        return _invitation_json(store.save_invitation(invitation_id, body.customization, body.content))
    except InvitationNotFoundError as e:
        raise HTTPException(404, str(e))
    except StorageError as e:
        log.warning("Sauvegarde invitation %s échouée : %s", invitation_id, e)
        raise HTTPException(503, "Stockage indisponible")
