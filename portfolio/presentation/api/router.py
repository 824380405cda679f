"""Top-level API router — aggregates every endpoint router under /api."""

from fastapi import APIRouter

from portfolio.presentation.api.endpoints.health import router as health_router
from portfolio.presentation.api.endpoints.hero import router as hero_router
from portfolio.presentation.api.endpoints.about import router as about_router
from portfolio.presentation.api.endpoints.projects import router as projects_router
from portfolio.presentation.api.endpoints.skills import router as skills_router
from portfolio.presentation.api.endpoints.blogs import router as blogs_router
from portfolio.presentation.api.endpoints.certifications import router as certifications_router
from portfolio.presentation.api.endpoints.featured_skills import router as featured_skills_router
from portfolio.presentation.api.endpoints.uploads import router as uploads_router
from portfolio.presentation.api.endpoints.content import router as content_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(hero_router)
router.include_router(about_router)
router.include_router(projects_router)
router.include_router(skills_router)
router.include_router(blogs_router)
router.include_router(certifications_router)
router.include_router(featured_skills_router)
router.include_router(uploads_router)
router.include_router(content_router)
