"""OEM and product catalogue"""

from typing import List
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import OemCreate, OemUpdate, ProductCreate, ProductUpdate
from tender_crm.domain.exceptions import NotFoundError
from tender_crm.infrastructure.database.models import Oem, Product
from tender_crm.infrastructure.database.repositories import OemRepository, ProductRepository
from tender_crm.utils import ids


class OemService:
    def __init__(self, db: Session):
        self.db = db
        self.oems = OemRepository(db)

    def list(self) -> List[Oem]:
        return self.oems.find(order_by=Oem.name.asc())

    def create(self, payload: OemCreate) -> Oem:
        oem = self.oems.insert(id=ids.new_id(ids.OEM), **payload.to_columns())
        self.db.commit()
        self.db.refresh(oem)
        return oem

    def update(self, oem_id: str, payload: OemUpdate) -> Oem:
        oem = self.oems.find_one(id=oem_id)
        if oem is None:
            raise NotFoundError("OEM not found")
        self.oems.assign(oem, payload.to_columns())
        self.oems.save(oem)
        self.db.commit()
        self.db.refresh(oem)
        return oem


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.products = ProductRepository(db)

    def list(self) -> List[Product]:
        return self.products.find(order_by=Product.name.asc())

    def create(self, payload: ProductCreate) -> Product:
        product = self.products.insert(
            id=ids.new_id(ids.PRODUCT),
            name=payload.name,
            documents=payload.to_columns().get("documents", []),
        )
        self.db.commit()
        self.db.refresh(product)
        return product

    def update(self, product_id: str, payload: ProductUpdate) -> Product:
        product = self.products.find_one(id=product_id)
        if product is None:
            raise NotFoundError("Product not found")
        self.products.assign(product, payload.to_columns())
        self.products.save(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete(self, product_id: str) -> None:
        if self.products.delete(id=product_id) == 0:
            raise NotFoundError("Product not found")
        self.db.commit()
