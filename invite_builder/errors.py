"""Exceptions invite_builder."""


class InviteBuilderError(Exception):
    """Erreur de base du package."""


class StorageError(InviteBuilderError):
    """Échec du collaborateur de persistance (lecture ou écriture)."""


class InvitationNotFoundError(InviteBuilderError, LookupError):
    def __init__(self, invitation_id: str):
        super().__init__(f"Invitation introuvable : {invitation_id!r}")
        self.invitation_id = invitation_id


class TemplateNotFoundError(InviteBuilderError, LookupError):
    def __init__(self, template_id: str):
        super().__init__(f"Template inconnu : {template_id!r}")
        self.template_id = template_id


class SlugConflictError(StorageError):
    def __init__(self, slug: str):
        super().__init__(f"Slug déjà utilisé : {slug!r}")
        self.slug = slug
