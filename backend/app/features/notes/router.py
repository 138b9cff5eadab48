"""
Notes feature: API routes for the note galleries.

Every gallery gets the same set of routes, typed with its own field model.
"""

from fastapi import APIRouter, Depends, status

from app.core.dependencies import controller_dependency, get_controllers
from app.core.exceptions import InvalidInputError, UnknownGalleryError, app_error_to_http
from app.features.notes.galleries import GALLERIES, GalleryDefinition, get_gallery
from app.features.notes.service import GalleryController


def build_gallery_router(gallery: GalleryDefinition) -> APIRouter:
    """Routes for one gallery: list, categories, add, edit, delete."""
    router = APIRouter()
    get_controller = controller_dependency(gallery.key)
    fields_model = gallery.fields_model

    @router.get("/")
    async def list_notes(controller: GalleryController = Depends(get_controller)):
        """List notes in insertion order."""
        return {"data": controller.list()}

    @router.get("/categories")
    async def list_categories():
        """Category enumeration of this gallery (empty when it has none)."""
        return {"data": gallery.category_names()}

    @router.post("/", status_code=status.HTTP_201_CREATED)
    async def create_note(
        data: fields_model,
        controller: GalleryController = Depends(get_controller),
    ):
        """Create a note; schedules its reminder when set in the future."""
        try:
            note = controller.add(gallery.note_model(**data.model_dump()))
        except InvalidInputError as e:
            raise app_error_to_http(e, 422)
        return {"data": note}

    @router.put("/{note_id}")
    async def update_note(
        note_id: str,
        data: fields_model,
        controller: GalleryController = Depends(get_controller),
    ):
        """Replace a note's fields. Unknown ids return null data."""
        try:
            note = controller.edit(note_id, data)
        except InvalidInputError as e:
            raise app_error_to_http(e, 422)
        return {"data": note}

    @router.delete("/{note_id}")
    async def delete_note(
        note_id: str,
        controller: GalleryController = Depends(get_controller),
    ):
        """Delete a note, cancelling its pending reminder first."""
        deleted = controller.delete(note_id)
        return {"data": {"id": note_id, "deleted": deleted}}

    return router


router = APIRouter()


@router.get("/")
async def list_galleries(controllers: dict[str, GalleryController] = Depends(get_controllers)):
    """All galleries with their note counts."""
    return {
        "data": [
            {"key": key, "label": g.label, "count": len(controllers[key].store)}
            for key, g in GALLERIES.items()
        ]
    }


@router.get("/{gallery_key}")
async def gallery_summary(
    gallery_key: str,
    controllers: dict[str, GalleryController] = Depends(get_controllers),
):
    """Summary of one gallery."""
    try:
        gallery = get_gallery(gallery_key)
    except UnknownGalleryError as e:
        raise app_error_to_http(e, status.HTTP_404_NOT_FOUND)
    return {
        "data": {
            "key": gallery.key,
            "label": gallery.label,
            "categories": gallery.category_names(),
            "count": len(controllers[gallery.key].store),
        }
    }


for _gallery in GALLERIES.values():
    router.include_router(
        build_gallery_router(_gallery),
        prefix=f"/{_gallery.key}/notes",
    )
