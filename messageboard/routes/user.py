# messageboard/routes/user.py
from typing import List

from fastapi import APIRouter, Depends, Path
from messageboard.database import Database, get_db
from messageboard import crud, schemas

router = APIRouter()

# signed 64-bit, the widest integer key the supported backends bind
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


@router.get("/", response_model=List[schemas.UserSummary])
def list_users(db: Database = Depends(get_db)):
    return crud.get_users(db)


@router.get("/{user_id}", response_model=schemas.UserWithMessages)
def get_user(
    user_id: int = Path(..., ge=MIN_ID, le=MAX_ID, description="User ID"),
    db: Database = Depends(get_db),
):
    return crud.get_user_with_messages(db, user_id)
