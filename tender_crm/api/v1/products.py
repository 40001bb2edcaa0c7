"""/api/v1/products"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import MessageResponse, ProductCreate, ProductResponse, ProductUpdate
from tender_crm.infrastructure.database.session import get_db
from tender_crm.services.catalog import ProductService

router = APIRouter()


@router.get("/products", response_model=List[ProductResponse])
def list_products(db: Session = Depends(get_db)):
    return [ProductResponse.model_validate(p) for p in ProductService(db).list()]


@router.post("/products", response_model=ProductResponse, status_code=201)
def create_product(request_body: ProductCreate, db: Session = Depends(get_db)):
    return ProductResponse.model_validate(ProductService(db).create(request_body))


@router.put("/products/{product_id}", response_model=ProductResponse)
def update_product(product_id: str, request_body: ProductUpdate, db: Session = Depends(get_db)):
    return ProductResponse.model_validate(ProductService(db).update(product_id, request_body))


@router.delete("/products/{product_id}", response_model=MessageResponse)
def delete_product(product_id: str, db: Session = Depends(get_db)):
    ProductService(db).delete(product_id)
    return MessageResponse(message="Product removed")
