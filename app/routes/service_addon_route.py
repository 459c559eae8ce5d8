from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from app.services.service_addon_crud import service_addon_crud
from app.schemas.service_addon_schema import (
    ServiceAddonCreate,
    ServiceAddonUpdate,
    ServiceAddonResponse,
    ServiceAddonOrder,
)
from app.schemas.service_schema import PositionUpdate, DeleteResponse
from app.database import get_db
from app.logger import get_logger

service_addon_router = APIRouter()
logger = get_logger(__name__)


@service_addon_router.get(
    "/service-addons",
    response_model=List[ServiceAddonResponse],
    status_code=status.HTTP_200_OK,
)
def get_addons(
    active: Optional[bool] = Query(None, description="Only return active add-ons when true"),
    db: Session = Depends(get_db),
):
    try:
        logger.info(f"Fetching service add-ons: active={active}")
        if active:
            addons = service_addon_crud.get_active_addons(db)
        else:
            addons = service_addon_crud.get_addons(db)
        return [ServiceAddonResponse.model_validate(addon) for addon in addons]

    except Exception as e:
        logger.error(f"Error fetching service add-ons: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while fetching service add-ons",
        )


@service_addon_router.get(
    "/service-addons/{addon_id}",
    response_model=ServiceAddonResponse,
    status_code=status.HTTP_200_OK,
)
def get_addon(addon_id: int, db: Session = Depends(get_db)):
    addon = service_addon_crud.get_addon_by_id(db, addon_id)
    if not addon:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Service add-on not found"
        )
    return ServiceAddonResponse.model_validate(addon)


@service_addon_router.post(
    "/service-addons",
    response_model=ServiceAddonResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_addon(addon: ServiceAddonCreate, db: Session = Depends(get_db)):
    try:
        logger.info(f"Creating service add-on: {addon.name}")
        db_addon = service_addon_crud.create_addon(db, addon)
        logger.info(f"Service add-on created: {db_addon.id}")
        return ServiceAddonResponse.model_validate(db_addon)

    except Exception as e:
        logger.error(f"Error creating service add-on: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while creating service add-on",
        )


@service_addon_router.post(
    "/service-addons/order",
    response_model=List[ServiceAddonResponse],
    status_code=status.HTTP_200_OK,
)
def update_addons_order(order: ServiceAddonOrder, db: Session = Depends(get_db)):
    try:
        logger.info(f"Reordering service add-ons: {order.addon_ids}")
        addons = service_addon_crud.update_addons_order(db, order.addon_ids)
        return [ServiceAddonResponse.model_validate(addon) for addon in addons]

    except Exception as e:
        logger.error(f"Error reordering service add-ons: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while reordering service add-ons",
        )


@service_addon_router.patch(
    "/service-addons/{addon_id}",
    response_model=ServiceAddonResponse,
    status_code=status.HTTP_200_OK,
)
def update_addon(
    addon_id: int,
    addon_update: ServiceAddonUpdate,
    db: Session = Depends(get_db),
):
    try:
        logger.info(f"Updating service add-on: {addon_id}")
        updated_addon = service_addon_crud.update_addon(db, addon_id, addon_update)
        if not updated_addon:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Service add-on not found"
            )
        return ServiceAddonResponse.model_validate(updated_addon)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating service add-on {addon_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while updating service add-on",
        )


@service_addon_router.patch(
    "/service-addons/{addon_id}/position",
    response_model=ServiceAddonResponse,
    status_code=status.HTTP_200_OK,
)
def update_addon_position(
    addon_id: int,
    payload: PositionUpdate,
    db: Session = Depends(get_db),
):
    addon = service_addon_crud.update_addon_position(db, addon_id, payload.position)
    if not addon:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Service add-on not found"
        )
    return ServiceAddonResponse.model_validate(addon)


@service_addon_router.delete(
    "/service-addons/{addon_id}",
    response_model=DeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_addon(addon_id: int, db: Session = Depends(get_db)):
    try:
        logger.info(f"Deleting service add-on: {addon_id}")
        if not service_addon_crud.delete_addon(db, addon_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Service add-on not found"
            )
        return DeleteResponse(success=True)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting service add-on {addon_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while deleting service add-on",
        )
