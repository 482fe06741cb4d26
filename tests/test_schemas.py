import pytest
from pydantic import ValidationError

from backoffice.schemas.cold_storage import ColdStorageTransactionUpdate
from backoffice.schemas.company import CompanyCreate, CompanyUpdate
from backoffice.schemas.inventory_master import InventoryMasterUpdate


def test_create_schema_accepts_camel_and_snake_case():
    by_alias = CompanyCreate.model_validate({"name": "Acme", "code": "AC1", "zipCode": "1"})
    by_name = CompanyCreate(name="Acme", code="AC1", zip_code="1")

    assert by_alias.zip_code == by_name.zip_code == "1"


def test_partial_schema_only_dumps_sent_fields():
    update = CompanyUpdate.model_validate({"isActive": False, "email": None})

    assert update.model_dump(exclude_unset=True) == {"is_active": False, "email": None}


def test_partial_schema_keeps_field_validators():
    with pytest.raises(ValidationError):
        InventoryMasterUpdate.model_validate({"unitPrice": "abc"})

    update = ColdStorageTransactionUpdate.model_validate({"exitDate": ""})
    assert update.model_dump(exclude_unset=True) == {"exit_date": None}


def test_partial_schema_rejects_null_for_required_fields():
    with pytest.raises(ValidationError):
        CompanyUpdate.model_validate({"name": None})


def test_partial_schema_name():
    assert CompanyUpdate.__name__ == "CompanyUpdate"
