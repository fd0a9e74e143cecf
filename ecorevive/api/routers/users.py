from fastapi import APIRouter, Depends, HTTPException

from ecorevive.data.store import EntityStore, get_store
from ecorevive.domain.errors import ConflictError, NotFoundError
from ecorevive.domain.schemas import UserCreate, UserLogin, UserRead
from ecorevive.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserRead, status_code=201)
def register(payload: UserCreate, store: EntityStore = Depends(get_store)):
    service = UserService(store)
    try:
        return service.register(payload)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/login", response_model=UserRead)
def login(payload: UserLogin, store: EntityStore = Depends(get_store)):
    service = UserService(store)
    try:
        return service.authenticate(payload.username, payload.password)
    except PermissionError as e:
        raise HTTPException(status_code=401, detail=str(e))


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, store: EntityStore = Depends(get_store)):
    service = UserService(store)
    try:
        return service.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
