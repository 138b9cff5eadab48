"""
FastAPI dependency injection functions.
"""

from fastapi import Request

from app.features.notes.service import GalleryController


def get_controllers(request: Request) -> dict[str, GalleryController]:
    """Dependency: all gallery controllers built during app startup."""
    return request.app.state.galleries


def controller_dependency(gallery_key: str):
    """Build a dependency returning the controller of one gallery."""

    def get_controller(request: Request) -> GalleryController:
        return get_controllers(request)[gallery_key]

    return get_controller
