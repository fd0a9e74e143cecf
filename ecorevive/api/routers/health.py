from fastapi import APIRouter, Depends

from ecorevive.data.store import EntityStore, get_store

router = APIRouter(tags=["health"])


@router.get("/health")
def health(store: EntityStore = Depends(get_store)):
    return {"status": "ok", "products": len(store.products)}
