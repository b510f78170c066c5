from datetime import datetime, timedelta, timezone

import pytest

from pricing_profiles.engine.models import (
    AdjustmentIncrement,
    PricingAdjustment,
    PricingProfile,
    Product,
    ProductPricing,
)
from pricing_profiles.store.catalog import CatalogRepository
from pricing_profiles.store.data_store import DataStore
from pricing_profiles.store.profiles import ProfileRepository


def make_product(product_id, **overrides):
    fields = dict(
        id=product_id,
        title=f"Test Wine {product_id}",
        sku_code=f"TEST{product_id}",
        brand="Test Brand",
        category_id="Alcoholic Beverage",
        sub_category_id="Wine",
        segment_id="Red",
        global_wholesale_price=100.0,
    )
    fields.update(overrides)
    return Product(**fields)


class FakeClock:
    """Returns a later time on every call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        self.current = self.current + self.step
        return self.current


@pytest.fixture
def seed_products():
    return [
        make_product("1", title="High Garden Pinot Noir 2021", sku_code="HGVPIN216", brand="High Garden",
                     segment_id="Red", global_wholesale_price=279.06),
        make_product("2", title="Koyama Methode Brut Nature NV", sku_code="KOYBRUNV6", brand="Koyama Wines",
                     segment_id="Sparkling", global_wholesale_price=120.00),
        make_product("3", title="Koyama Riesling 2018", sku_code="KOYNR1837", brand="Koyama Wines",
                     segment_id="Port/Dessert", global_wholesale_price=215.04),
        make_product("4", title="Koyama Tussock Riesling 2019", sku_code="KOYRIE19", brand="Koyama Wines",
                     segment_id="White", global_wholesale_price=215.04),
        make_product("5", title="Lacourte-Godbillon Brut Cru NV", sku_code="LACBNATNV6", brand="Lacourte-Godbillon",
                     segment_id="Sparkling", global_wholesale_price=409.32),
        make_product("6", title="High Garden Chardonnay 2020", sku_code="HGCHAR20", brand="High Garden",
                     segment_id="White", global_wholesale_price=245.50),
    ]


@pytest.fixture(scope="function")
def catalog(seed_products):
    return CatalogRepository(seed_products)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def profiles(clock):
    return ProfileRepository(clock=clock)


@pytest.fixture(scope="function")
def store(seed_products, clock):
    return DataStore(catalog=CatalogRepository(seed_products), profiles=ProfileRepository(clock=clock))


@pytest.fixture
def ten_percent_off():
    return PricingAdjustment.dynamic(AdjustmentIncrement.DECREASE, 10)


@pytest.fixture
def sample_profile(ten_percent_off):
    created = datetime(2025, 6, 1, 9, 30, tzinfo=timezone.utc)
    return PricingProfile(
        id="profile-1",
        name="VIP Discount",
        description="Special pricing for VIP customers",
        based_on_profile="global",
        product_pricings=[
            ProductPricing(product_id="2", based_on_price=120.0, adjustment=ten_percent_off, new_price=108.0),
        ],
        created_at=created,
        updated_at=created,
    )
