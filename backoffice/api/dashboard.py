# backoffice/api/dashboard.py

from fastapi import APIRouter, Depends

from backoffice.core.errors import store_errors
from backoffice.database import get_store
from backoffice.models.cold_storage import ColdStorageUnit
from backoffice.models.company import Company
from backoffice.models.customer import Customer
from backoffice.models.inventory_master import InventoryMaster
from backoffice.models.supplier import Supplier
from backoffice.models.transaction import Transaction
from backoffice.schemas.summary import DashboardMetrics
from backoffice.storage.store import ResourceStore

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/metrics", response_model=DashboardMetrics)
def dashboard_metrics(store: ResourceStore = Depends(get_store)):
    """Headline counts for the landing page."""
    with store_errors("Failed to fetch dashboard metrics"):
        customers = store.collection(Customer).list()
        return DashboardMetrics(
            companies=store.collection(Company).count(),
            inventory_items=store.collection(InventoryMaster).count(),
            customers=len(customers),
            suppliers=store.collection(Supplier).count(),
            cold_storage_units=store.collection(ColdStorageUnit).count(),
            active_customers=sum(1 for c in customers if c.is_active),
            transactions=store.collection(Transaction).count(),
        )
