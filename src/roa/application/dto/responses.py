from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class RestaurantResponse(BaseModel):
    id: str
    name: str
    cuisine: str
    location: str
    createdAt: datetime


class RestaurantWithStatsResponse(RestaurantResponse):
    totalRevenue: str
    totalOrders: int
    avgOrderValue: str


class OrderResponse(BaseModel):
    id: str
    restaurantId: str
    amount: str
    timestamp: datetime
    createdAt: datetime


class OrderWithRestaurantResponse(OrderResponse):
    restaurant: RestaurantResponse


class DailyOrdersPoint(BaseModel):
    date: str
    count: int


class DailyRevenuePoint(BaseModel):
    date: str
    revenue: str


class PeakHourPoint(BaseModel):
    hour: int
    count: int


class AnalyticsResponse(BaseModel):
    dailyOrders: list[DailyOrdersPoint] = Field(default_factory=list)
    dailyRevenue: list[DailyRevenuePoint] = Field(default_factory=list)
    avgOrderValue: str = "0"
    peakHours: list[PeakHourPoint] = Field(default_factory=list)


class DashboardStatsResponse(BaseModel):
    totalRevenue: str
    totalOrders: int
    avgOrderValue: str
    activeRestaurants: int


class SeedCountsResponse(BaseModel):
    restaurants: int
    orders: int


class SeedResponse(BaseModel):
    message: str
    data: SeedCountsResponse
