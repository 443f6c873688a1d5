"""Pydantic models for the shoot API payloads."""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from shoot_tracker.domain.shoots import EditedShoot, Shoot, ShootDetails
from shoot_tracker.domain.stats import EarningsSummary, MonthlyStats


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())


class ShootPayload(_CamelModel):
    """Fields accepted when creating or updating a shoot."""

    model_name: str = Field(alias="modelName", min_length=1)
    salon_name: str = Field(alias="salonName", min_length=1)
    date: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)

    def to_details(self) -> ShootDetails:
        return ShootDetails(
            model_name=self.model_name,
            salon_name=self.salon_name,
            date=self.date,
            price=self.price,
        )


class ShootResponse(_CamelModel):
    """A pending shoot."""

    id: str
    model_name: str = Field(alias="modelName")
    salon_name: str = Field(alias="salonName")
    date: str
    price: float
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_domain(cls, shoot: Shoot) -> Self:
        return cls(
            id=shoot.id,
            model_name=shoot.model_name,
            salon_name=shoot.salon_name,
            date=shoot.date,
            price=shoot.price,
            created_at=shoot.created_at,
            updated_at=shoot.updated_at,
        )


class EditedShootResponse(_CamelModel):
    """An edited shoot."""

    id: str
    original_shoot_id: str = Field(alias="originalShootId")
    model_name: str = Field(alias="modelName")
    salon_name: str = Field(alias="salonName")
    date: str
    price: float
    created_at: datetime = Field(alias="createdAt")
    edited_at: datetime = Field(alias="editedAt")

    @classmethod
    def from_domain(cls, edited: EditedShoot) -> Self:
        return cls(
            id=edited.id,
            original_shoot_id=edited.original_shoot_id,
            model_name=edited.model_name,
            salon_name=edited.salon_name,
            date=edited.date,
            price=edited.price,
            created_at=edited.created_at,
            edited_at=edited.edited_at,
        )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class MonthlyStatsResponse(_CamelModel):
    """Earnings for one month."""

    month: str
    year: int
    month_number: int = Field(alias="monthNumber")
    shoot_count: int = Field(alias="shootCount")
    total_earnings: float = Field(alias="totalEarnings")

    @classmethod
    def from_domain(cls, stats: MonthlyStats) -> Self:
        return cls(
            month=stats.month,
            year=stats.year,
            month_number=stats.month_number,
            shoot_count=stats.shoot_count,
            total_earnings=stats.total_earnings,
        )


class EarningsSummaryResponse(_CamelModel):
    """Earnings totals with the monthly breakdown."""

    total_shoots: int = Field(alias="totalShoots")
    total_earnings: float = Field(alias="totalEarnings")
    average_per_shoot: float = Field(alias="averagePerShoot")
    months: list[MonthlyStatsResponse]

    @classmethod
    def from_domain(cls, summary: EarningsSummary) -> Self:
        return cls(
            total_shoots=summary.total_shoots,
            total_earnings=summary.total_earnings,
            average_per_shoot=summary.average_per_shoot,
            months=[MonthlyStatsResponse.from_domain(item) for item in summary.months],
        )
