from fastapi import APIRouter
from . import auth, members, news, contact

router = APIRouter()

router.include_router(auth.router, tags=["Auth"])
router.include_router(members.router, prefix="/members", tags=["Members"])
router.include_router(news.router, prefix="/news", tags=["News"])
router.include_router(contact.router, prefix="/contact", tags=["Contact"])
