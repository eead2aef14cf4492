"""Contract service for contracts, their files and totals."""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.exceptions import (
    ContractFileNotFoundError,
    ContractNotFoundError,
    ContractNumberExistsError,
    InvalidDateRangeError,
    StoredFileMissingError,
    SupplierNotFoundError,
)
from supplier_api.models.dto.contract import (
    ContractCreate,
    ContractFileResponse,
    ContractListResponse,
    ContractResponse,
    ContractTotalsResponse,
    ContractUpdate,
    SupplierContractTotals,
)
from supplier_api.models.orm.contract import ContractORM
from supplier_api.repositories.contract_repository import (
    ContractFileRepository,
    ContractRepository,
)
from supplier_api.repositories.supplier_repository import SupplierRepository
from supplier_api.services.blob_storage import BlobStorage
from supplier_api.services.document_service import StoredFile, validate_pdf_upload
from supplier_api.utils.validation import sanitize_filename

logger = logging.getLogger(__name__)


def _to_response(contract: ContractORM) -> ContractResponse:
    return ContractResponse(
        id=contract.id,
        contract_number=contract.contract_number,
        supplier_id=contract.supplier_id,
        supplier_name=contract.supplier.name,
        description=contract.description,
        amount=contract.amount,
        start_date=contract.start_date,
        end_date=contract.end_date,
        files=[ContractFileResponse.model_validate(f) for f in contract.files],
        created_at=contract.created_at,
        updated_at=contract.updated_at,
    )


class ContractService:
    """Service for contract operations."""

    def __init__(self, session: AsyncSession, storage: BlobStorage) -> None:
        """Initialize service with database session and blob storage."""
        self.session = session
        self.storage = storage
        self.contract_repo = ContractRepository(session)
        self.file_repo = ContractFileRepository(session)
        self.supplier_repo = SupplierRepository(session)

    async def _load(self, contract_id: UUID) -> ContractORM:
        contract = await self.contract_repo.get_with_files(contract_id)
        if contract is None:
            raise ContractNotFoundError(str(contract_id))
        return contract

    async def _reload(self, contract_id: UUID) -> ContractORM:
        # Drop identity-map state so server-side timestamps and files are fetched fresh
        self.session.expunge_all()
        return await self._load(contract_id)

    async def _ensure_supplier(self, supplier_id: UUID) -> None:
        if await self.supplier_repo.get_by_id(supplier_id) is None:
            raise SupplierNotFoundError(str(supplier_id))

    async def _ensure_number_free(
        self, contract_number: str, exclude_id: UUID | None = None
    ) -> None:
        existing = await self.contract_repo.get_by_number(contract_number)
        if existing is not None and existing.id != exclude_id:
            raise ContractNumberExistsError(contract_number)

    async def list_contracts(self, supplier_id: UUID | None = None) -> ContractListResponse:
        """List contracts ordered by contract number.

        Args:
            supplier_id: Only contracts of this supplier

        Returns:
            ContractListResponse with the summed amount of the listed contracts
        """
        contracts = await self.contract_repo.get_all_with_files(supplier_id)
        items = [_to_response(c) for c in contracts]
        total_amount = sum((c.amount or Decimal("0") for c in contracts), Decimal("0"))
        return ContractListResponse(items=items, total=len(items), total_amount=total_amount)

    async def get_contract(self, contract_id: UUID) -> ContractResponse:
        """Get one contract with its files.

        Raises:
            ContractNotFoundError: If the contract does not exist
        """
        return _to_response(await self._load(contract_id))

    async def create_contract(self, data: ContractCreate) -> ContractResponse:
        """Create a contract.

        Raises:
            SupplierNotFoundError: If the supplier does not exist
            ContractNumberExistsError: If the contract number is taken
        """
        await self._ensure_supplier(data.supplier_id)
        await self._ensure_number_free(data.contract_number)

        contract = await self.contract_repo.create(**data.model_dump())
        contract_id = contract.id
        await self.session.commit()
        logger.info("Created contract %s", contract_id)
        return _to_response(await self._reload(contract_id))

    async def update_contract(self, contract_id: UUID, data: ContractUpdate) -> ContractResponse:
        """Update the fields of a contract that are set in ``data``.

        Raises:
            ContractNotFoundError: If the contract does not exist
            SupplierNotFoundError: If the new supplier does not exist
            ContractNumberExistsError: If the new contract number is taken
        """
        contract = await self._load(contract_id)
        changes = data.model_dump(exclude_unset=True)

        # Required columns cannot be cleared
        for key in ("contract_number", "supplier_id"):
            if key in changes and changes[key] is None:
                del changes[key]

        if "supplier_id" in changes:
            await self._ensure_supplier(changes["supplier_id"])
        if "contract_number" in changes:
            await self._ensure_number_free(changes["contract_number"], exclude_id=contract_id)

        start = changes.get("start_date", contract.start_date)
        end = changes.get("end_date", contract.end_date)
        if start and end and end < start:
            raise InvalidDateRangeError()

        await self.contract_repo.update(contract, **changes)
        await self.session.commit()
        return _to_response(await self._reload(contract_id))

    async def delete_contract(self, contract_id: UUID) -> None:
        """Delete a contract, its stored files (best effort) and file rows.

        Raises:
            ContractNotFoundError: If the contract does not exist
        """
        contract = await self._load(contract_id)
        for contract_file in contract.files:
            self.storage.delete_quietly(contract_file.storage_key)
        await self.contract_repo.delete(contract)
        await self.session.commit()
        logger.info("Deleted contract %s", contract_id)

    async def upload_file(
        self,
        contract_id: UUID,
        filename: str | None,
        content: bytes,
        content_type: str | None,
        max_size: int,
    ) -> ContractFileResponse:
        """Attach a PDF to a contract.

        Raises:
            ContractNotFoundError: If the contract does not exist
            InvalidUploadError: If the file is not an acceptable PDF
        """
        contract = await self.contract_repo.get_by_id(contract_id)
        if contract is None:
            raise ContractNotFoundError(str(contract_id))

        validate_pdf_upload(content, content_type, max_size)
        storage_key = self.storage.contract_file_key(contract_id)
        self.storage.put(storage_key, content)

        contract_file = await self.file_repo.create(
            contract_id=contract_id,
            file_name=sanitize_filename(filename),
            storage_key=storage_key,
            file_size=len(content),
            uploaded_at=datetime.now(timezone.utc),
        )
        await self.session.commit()
        logger.info("Attached file %s to contract %s", contract_file.id, contract_id)
        return ContractFileResponse.model_validate(contract_file)

    async def get_file(self, contract_id: UUID, file_id: UUID) -> StoredFile:
        """Fetch a file attached to a contract.

        Raises:
            ContractFileNotFoundError: If the file does not belong to the contract
            StoredFileMissingError: If the blob is gone
        """
        contract_file = await self.file_repo.get_for_contract(contract_id, file_id)
        if contract_file is None:
            raise ContractFileNotFoundError(str(file_id))
        content = self.storage.get(contract_file.storage_key)
        if content is None:
            raise StoredFileMissingError(contract_file.storage_key)
        return StoredFile(file_name=contract_file.file_name, content=content)

    async def delete_file(self, contract_id: UUID, file_id: UUID) -> None:
        """Delete a contract file, blob first (best effort), then its row.

        Raises:
            ContractFileNotFoundError: If the file does not belong to the contract
        """
        contract_file = await self.file_repo.get_for_contract(contract_id, file_id)
        if contract_file is None:
            raise ContractFileNotFoundError(str(file_id))
        self.storage.delete_quietly(contract_file.storage_key)
        await self.file_repo.delete(contract_file)
        await self.session.commit()

    async def get_totals(self) -> ContractTotalsResponse:
        """Get contract count and amount overall and per supplier."""
        count, total_amount = await self.contract_repo.get_totals()
        rows = await self.contract_repo.get_totals_by_supplier()
        by_supplier = [
            SupplierContractTotals(
                supplier_id=supplier_id,
                supplier_name=name,
                count=supplier_count,
                total_amount=amount,
            )
            for supplier_id, name, supplier_count, amount in rows
        ]
        return ContractTotalsResponse(
            count=count, total_amount=total_amount, by_supplier=by_supplier
        )
