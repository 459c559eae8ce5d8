from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from app.services.service_crud import service_crud
from app.schemas.service_schema import (
    ServiceCreate,
    ServiceUpdate,
    ServiceResponse,
    PositionUpdate,
    ServiceOrder,
    DeleteResponse,
)
from app.database import get_db
from app.logger import get_logger

service_router = APIRouter()
logger = get_logger(__name__)


@service_router.get(
    "/services", response_model=List[ServiceResponse], status_code=status.HTTP_200_OK
)
def get_services(
    active: Optional[bool] = Query(None, description="Only return active services when true"),
    db: Session = Depends(get_db),
):
    """Get services ordered by position"""
    try:
        logger.info(f"Fetching services: active={active}")
        if active:
            services = service_crud.get_active_services(db)
        else:
            services = service_crud.get_services(db)
        return [ServiceResponse.model_validate(service) for service in services]

    except Exception as e:
        logger.error(f"Error fetching services: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while fetching services",
        )


@service_router.get(
    "/services/{service_id}",
    response_model=ServiceResponse,
    status_code=status.HTTP_200_OK,
)
def get_service(service_id: int, db: Session = Depends(get_db)):
    try:
        logger.info(f"Fetching service: {service_id}")
        service = service_crud.get_service_by_id(db, service_id)
        if not service:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Service not found"
            )
        return ServiceResponse.model_validate(service)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching service {service_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while fetching service",
        )


@service_router.post(
    "/services", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED
)
def create_service(service: ServiceCreate, db: Session = Depends(get_db)):
    try:
        logger.info(f"Creating service: {service.name}")
        db_service = service_crud.create_service(db, service)
        logger.info(f"Service created: {db_service.id} at position {db_service.position}")
        return ServiceResponse.model_validate(db_service)

    except Exception as e:
        logger.error(f"Error creating service: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while creating service",
        )


@service_router.post(
    "/services/order",
    response_model=List[ServiceResponse],
    status_code=status.HTTP_200_OK,
)
def update_services_order(order: ServiceOrder, db: Session = Depends(get_db)):
    """Rewrite positions to follow the order of the given ids"""
    try:
        logger.info(f"Reordering services: {order.service_ids}")
        services = service_crud.update_services_order(db, order.service_ids)
        return [ServiceResponse.model_validate(service) for service in services]

    except Exception as e:
        logger.error(f"Error reordering services: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while reordering services",
        )


@service_router.patch(
    "/services/{service_id}",
    response_model=ServiceResponse,
    status_code=status.HTTP_200_OK,
)
def update_service(
    service_id: int,
    service_update: ServiceUpdate,
    db: Session = Depends(get_db),
):
    try:
        logger.info(f"Updating service: {service_id}")
        updated_service = service_crud.update_service(db, service_id, service_update)
        if not updated_service:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Service not found"
            )
        return ServiceResponse.model_validate(updated_service)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating service {service_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while updating service",
        )


@service_router.patch(
    "/services/{service_id}/position",
    response_model=ServiceResponse,
    status_code=status.HTTP_200_OK,
)
def update_service_position(
    service_id: int,
    payload: PositionUpdate,
    db: Session = Depends(get_db),
):
    try:
        logger.info(f"Moving service {service_id} to position {payload.position}")
        service = service_crud.update_service_position(db, service_id, payload.position)
        if not service:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Service not found"
            )
        return ServiceResponse.model_validate(service)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error moving service {service_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while updating service position",
        )


@service_router.delete(
    "/services/{service_id}",
    response_model=DeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_service(service_id: int, db: Session = Depends(get_db)):
    try:
        logger.info(f"Deleting service: {service_id}")
        if not service_crud.delete_service(db, service_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Service not found"
            )
        logger.info(f"Service deleted: {service_id}")
        return DeleteResponse(success=True)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting service {service_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while deleting service",
        )
