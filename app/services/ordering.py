"""Dense ``position`` ordering shared by services and service add-ons.

Positions are plain integers; lower sorts first. Nothing here renumbers rows
that the caller did not mention.
"""
from typing import List, Optional, Type
from sqlalchemy import func
from sqlalchemy.orm import Session


def next_position(db: Session, model: Type) -> int:
    """Position for a new row: one past the current maximum, 0 when empty"""
    highest = db.query(func.max(model.position)).scalar()
    return 0 if highest is None else highest + 1


def ordered_query(db: Session, model: Type, active: Optional[bool] = None):
    query = db.query(model)
    if active is not None:
        query = query.filter(model.active == active)
    return query.order_by(model.position.asc(), model.id.asc())


def set_position(db: Session, model: Type, item_id: int, position: int):
    item = db.get(model, item_id)
    if not item:
        return None
    item.position = position
    db.commit()
    db.refresh(item)
    return item


def reorder(db: Session, model: Type, ids: List[int]) -> list:
    """Set ``position = index`` for every known id, in the order given.

    Unknown ids are skipped and rows missing from ``ids`` keep whatever
    position they had.
    """
    updated = []
    for index, item_id in enumerate(ids):
        item = db.get(model, item_id)
        if item:
            item.position = index
            updated.append(item)
    db.commit()
    for item in updated:
        db.refresh(item)
    return updated
