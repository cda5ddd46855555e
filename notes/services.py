"""
Note graph operations.

Notes form a directed graph through ``NoteLink`` rows (parent -> child).
Every function here is scoped by the owning ``user_id``: a note or link that
belongs to someone else is reported exactly like one that does not exist.

Invariants kept by this module:

* a note has at most one incoming link (one parent);
* a note is never its own parent;
* links only ever join two notes of the same user;
* deleting a note removes every link that touches it.
"""
import logging

from django.db import transaction
from django.db.models import OuterRef, Q, Subquery
from django.utils import timezone

from core.exceptions import NotFoundError, ValidationError
from .models import Note, NoteLink

logger = logging.getLogger(__name__)


def _with_parent(queryset):
    # Left join of each note to its (single) incoming link.
    parent = NoteLink.objects.filter(
        user_id=OuterRef("user_id"),
        target_id=OuterRef("pk"),
    ).values("source_id")[:1]
    return queryset.annotate(parent_id=Subquery(parent))


def _require_title(title):
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")
    return title.strip()


def _require_parent(user_id, parent_id):
    # Security: the parent must be one of the caller's own notes
    if not Note.objects.filter(pk=parent_id, user_id=user_id).exists():
        raise NotFoundError("Parent note not found")


def create_note(user_id, title, parent_id=None):
    title = _require_title(title)

    with transaction.atomic():
        if parent_id is not None:
            _require_parent(user_id, parent_id)
        note = Note.objects.create(user_id=user_id, title=title, content="")
        if parent_id is not None:
            NoteLink.objects.create(user_id=user_id, source_id=parent_id, target_id=note.pk)

    note.parent_id = parent_id
    logger.info("User %s created note %s (parent=%s)", user_id, note.pk, parent_id)
    return note


def update_note(user_id, note_id, title, content, parent_id=None):
    """
    Update a note's title and content and rewire its parent link.

    Runs in a single transaction: any failure leaves the note and its links
    exactly as they were. ``parent_id=None`` detaches the note, making it a
    root. Returns the note re-read with its resolved ``parent_id``.
    """
    if parent_id is not None and parent_id == note_id:
        raise ValidationError("Note cannot be its own parent")
    title = _require_title(title)

    with transaction.atomic():
        updated = Note.objects.filter(pk=note_id, user_id=user_id).update(
            title=title,
            content=content or "",
            updated_at=timezone.now(),
        )
        if not updated:
            raise NotFoundError("Note not found")

        if parent_id is not None:
            _require_parent(user_id, parent_id)

        existing = (
            NoteLink.objects.select_for_update()
            .filter(user_id=user_id, target_id=note_id)
            .first()
        )

        if parent_id is not None:
            if existing is None:
                NoteLink.objects.create(user_id=user_id, source_id=parent_id, target_id=note_id)
            elif existing.source_id != parent_id:
                existing.source_id = parent_id
                existing.save(update_fields=["source"])
        elif existing is not None:
            existing.delete()

    logger.info("User %s updated note %s (parent=%s)", user_id, note_id, parent_id)
    return get_note_by_id(user_id, note_id)


def delete_note(user_id, note_id):
    with transaction.atomic():
        note = Note.objects.select_for_update().filter(pk=note_id, user_id=user_id).first()
        if note is None:
            raise NotFoundError("Note not found")

        removed, _ = NoteLink.objects.filter(user_id=user_id).filter(
            Q(source_id=note_id) | Q(target_id=note_id)
        ).delete()
        note.delete()

    logger.info("User %s deleted note %s and %s link(s)", user_id, note_id, removed)


def get_note_by_id(user_id, note_id):
    note = _with_parent(Note.objects.filter(pk=note_id, user_id=user_id)).first()
    if note is None:
        raise NotFoundError("Note not found")
    return note


def list_notes(user_id):
    return list(_with_parent(Note.objects.filter(user_id=user_id)).order_by("id"))


def mark_roots(nodes, links):
    """
    Flag each node with ``isRoot``: true iff no link targets it.

    ``notegraph_client.graph.mark_roots`` is the client-side copy of this function.
    """
    targets = {link["target"] for link in links}
    return [dict(node, isRoot=node["id"] not in targets) for node in nodes]


def get_graph(user_id):
    nodes = list(Note.objects.filter(user_id=user_id).order_by("id").values("id", "title"))
    links = [
        {"source": source, "target": target}
        for source, target in NoteLink.objects.filter(user_id=user_id)
        .order_by("id")
        .values_list("source_id", "target_id")
    ]
    return {"nodes": mark_roots(nodes, links), "links": links}
