"""Tests for fee models and fee computation."""

from unittest.mock import Mock

import pytest

from opensea_sdk.enums import OrderSide
from opensea_sdk.errors import InvalidFeeError
from opensea_sdk.models.fees import ComputedFees, Fees, OpenSeaFees, compute_fees, fee_amount


def _collection_asset(opensea_seller=250, opensea_buyer=0, dev_seller=500, dev_buyer=0):
    collection = Mock(
        opensea_seller_fee_basis_points=opensea_seller,
        opensea_buyer_fee_basis_points=opensea_buyer,
        dev_seller_fee_basis_points=dev_seller,
        dev_buyer_fee_basis_points=dev_buyer,
    )
    return Mock(collection=collection)


class TestOpenSeaFees:
    """Test suite for OpenSeaFees."""

    def test_creation(self):
        fees = OpenSeaFees(
            opensea_seller_fee_basis_points=250,
            opensea_buyer_fee_basis_points=0,
            dev_seller_fee_basis_points=500,
            dev_buyer_fee_basis_points=0,
        )

        assert fees.fee_basis_points() == {
            "opensea_seller_fee_basis_points": 250,
            "opensea_buyer_fee_basis_points": 0,
            "dev_seller_fee_basis_points": 500,
            "dev_buyer_fee_basis_points": 0,
        }

    @pytest.mark.parametrize("value", [-1, 10001, True, "250"])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidFeeError):
            OpenSeaFees(
                opensea_seller_fee_basis_points=value,
                opensea_buyer_fee_basis_points=0,
                dev_seller_fee_basis_points=0,
                dev_buyer_fee_basis_points=0,
            )

    def test_fee_map_validated(self):
        with pytest.raises(InvalidFeeError, match="0xabc"):
            Fees(opensea_fees={"0xdef": 250}, seller_fees={"0xabc": 20000})


class TestComputedFees:
    """Test suite for ComputedFees."""

    def test_totals_must_match(self):
        """Test that totals inconsistent with their parts are rejected."""
        with pytest.raises(InvalidFeeError, match="total_seller_fee_basis_points"):
            ComputedFees(
                opensea_seller_fee_basis_points=250,
                opensea_buyer_fee_basis_points=0,
                dev_seller_fee_basis_points=500,
                dev_buyer_fee_basis_points=0,
                total_buyer_fee_basis_points=0,
                total_seller_fee_basis_points=250,
            )

    def test_from_fees(self):
        fees = OpenSeaFees(
            opensea_seller_fee_basis_points=250,
            opensea_buyer_fee_basis_points=100,
            dev_seller_fee_basis_points=500,
            dev_buyer_fee_basis_points=50,
        )

        computed = ComputedFees.from_fees(fees, seller_bounty_basis_points=25)

        assert computed.total_buyer_fee_basis_points == 150
        assert computed.total_seller_fee_basis_points == 750
        assert computed.seller_bounty_basis_points == 25


class TestComputeFees:
    """Test suite for compute_fees."""

    def test_defaults_without_asset(self):
        fees = compute_fees()

        assert fees.opensea_seller_fee_basis_points == 250
        assert fees.opensea_buyer_fee_basis_points == 0
        assert fees.dev_seller_fee_basis_points == 0
        assert fees.total_seller_fee_basis_points == 250
        assert fees.total_buyer_fee_basis_points == 0
        assert fees.seller_bounty_basis_points == 0

    def test_uses_collection_fees(self):
        fees = compute_fees(asset=_collection_asset())

        assert fees.dev_seller_fee_basis_points == 500
        assert fees.total_seller_fee_basis_points == 750

    def test_seller_bounty_within_limit(self):
        fees = compute_fees(side=OrderSide.SELL, extra_bounty_basis_points=100)

        assert fees.seller_bounty_basis_points == 100

    def test_seller_bounty_too_large(self):
        """Test that the bounty plus OpenSea's referrer share is capped."""
        with pytest.raises(InvalidFeeError, match=r"\(2\.5%\)"):
            compute_fees(side=OrderSide.SELL, extra_bounty_basis_points=200)

    def test_bounty_capped_by_collection_fee(self):
        with pytest.raises(InvalidFeeError, match=r"\(1\.0%\)"):
            compute_fees(
                asset=_collection_asset(opensea_seller=100),
                side=OrderSide.SELL,
                extra_bounty_basis_points=1,
            )

    def test_buy_orders_ignore_bounty(self):
        fees = compute_fees(side=OrderSide.BUY, extra_bounty_basis_points=200)

        assert fees.seller_bounty_basis_points == 0


class TestFeeAmount:

    def test_rounds_down(self):
        assert fee_amount(10 ** 18, 250) == 25 * 10 ** 15
        assert fee_amount(999, 250) == 24

    def test_invalid_basis_points(self):
        with pytest.raises(InvalidFeeError):
            fee_amount(1000, 10001)
