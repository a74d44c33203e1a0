"""
Mapping of partner entities to DTOs.
"""
import uuid
from typing import Dict, List, Optional

from accounts.application.services.account_provisioning import account_summary
from accounts.domain.account import Account
from partners.application.dto.partner_dto import (
    DistributorDTO,
    DistributorSummaryDTO,
    LocationDTO,
    SellerConfigDTO,
    SellerDTO,
)
from partners.domain.distributor import Distributor
from partners.domain.location import Location
from partners.domain.seller import Seller


def seller_to_dto(seller: Seller, account: Optional[Account] = None) -> SellerDTO:
    config = seller.config
    return SellerDTO(
        id=seller.id,
        location_id=seller.location_id,
        name=seller.name,
        is_active=seller.is_active,
        user=account_summary(account),
        config=SellerConfigDTO(
            send_method=config.send_method.value,
            landing_page_required=config.landing_page_required,
            allow_custom_guests_days=config.allow_custom_guests_days,
            default_guests=config.default_guests,
            default_days=config.default_days,
            pricing_type=config.pricing_type.value,
            fixed_price=config.fixed_price,
            send_rebuy_email=config.send_rebuy_email,
        )
        if config
        else None,
        created_at=seller.created_at,
    )


def location_to_dto(
    location: Location,
    account: Optional[Account] = None,
    sellers: Optional[List[SellerDTO]] = None,
) -> LocationDTO:
    return LocationDTO(
        id=location.id,
        distributor_id=location.distributor_id,
        name=location.name,
        is_active=location.is_active,
        contact_person=location.contact.contact_person,
        email=location.contact.email,
        telephone=location.contact.telephone,
        notes=location.contact.notes,
        user=account_summary(account),
        created_at=location.created_at,
        sellers=sellers or [],
    )


def distributor_to_dto(
    distributor: Distributor,
    account: Optional[Account] = None,
    locations: Optional[List[LocationDTO]] = None,
) -> DistributorDTO:
    contact = distributor.contact
    return DistributorDTO(
        id=distributor.id,
        name=distributor.name,
        is_active=distributor.is_active,
        contact_person=contact.contact_person,
        email=contact.email,
        alternative_email=contact.alternative_email,
        telephone=contact.telephone,
        notes=contact.notes,
        user=account_summary(account),
        created_at=distributor.created_at,
        locations=locations or [],
    )


def distributor_to_summary(
    distributor: Distributor,
    accounts: Dict[uuid.UUID, Account],
    location_counts: Dict[uuid.UUID, int],
) -> DistributorSummaryDTO:
    return DistributorSummaryDTO(
        id=distributor.id,
        name=distributor.name,
        is_active=distributor.is_active,
        user=account_summary(accounts.get(distributor.account_id)),
        location_count=location_counts.get(distributor.id, 0),
        created_at=distributor.created_at,
    )
