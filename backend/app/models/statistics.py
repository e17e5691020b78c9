"""Aggregate and response models."""
from typing import Dict, List, Union
from pydantic import BaseModel, ConfigDict, Field
from app.models.transaction import Transaction


class Statistics(BaseModel):
    """Summary totals for a filtered set of transactions."""

    model_config = ConfigDict(populate_by_name=True)

    total_sales: Union[int, float] = Field(default=0, alias="totalSales", description="Sum of price over matches")
    sold_items: int = Field(default=0, alias="soldItems", description="Matches with sold = true")
    unsold_items: int = Field(default=0, alias="unsoldItems", description="Matches with sold = false")


class DashboardResponse(BaseModel):
    """Page of transactions bundled with the three aggregate views."""

    model_config = ConfigDict(populate_by_name=True)

    transactions: List[Transaction] = Field(default_factory=list)
    statistics: Statistics = Field(default_factory=Statistics)
    bar_chart: Dict[str, int] = Field(default_factory=dict, alias="barChart")
    pie_chart: Dict[str, int] = Field(default_factory=dict, alias="pieChart")
