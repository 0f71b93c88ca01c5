"""
Tenancy/Lease Orchestrator Use Cases

draft -> awaiting_tenant_signature -> awaiting_landlord_signature -> completed
"""

from .dtos import LeaseClause, LeaseTermsInput, TenancyListResponse, TenancyResponse
from .landlord_sign_lease_use_case import LandlordSignLeaseUseCase
from .list_tenancies_use_case import GetTenancyUseCase, ListTenanciesUseCase
from .request_document_generation_use_case import RequestDocumentGenerationUseCase
from .start_lease_use_case import StartLeaseUseCase
from .tenant_sign_lease_use_case import TenantSignLeaseUseCase

__all__ = [
    "StartLeaseUseCase",
    "RequestDocumentGenerationUseCase",
    "TenantSignLeaseUseCase",
    "LandlordSignLeaseUseCase",
    "ListTenanciesUseCase",
    "GetTenancyUseCase",
    "LeaseClause",
    "LeaseTermsInput",
    "TenancyResponse",
    "TenancyListResponse",
]
