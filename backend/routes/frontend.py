# backend/routes/frontend.py
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from config import settings
from utils.access import authorize_request

router = APIRouter(tags=["Frontend"], include_in_schema=False)


def _document(*parts: str) -> FileResponse:
    path = Path(settings.FRONTEND_DIR).joinpath(*parts)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Page not found")
    return FileResponse(path, media_type="text/html")


# Shop front-end
@router.get("/")
def shop_page():
    return _document("shop.html")


# Admin panel (no real auth, see utils/access.py)
@router.get("/admin/products", dependencies=[Depends(authorize_request)])
def admin_products_page():
    return _document("adminpanel", "products.html")


@router.get("/admin/login", dependencies=[Depends(authorize_request)])
def admin_login_page():
    return _document("adminpanel", "adminlogin.html")
