import pytest
from pydantic import ValidationError

from bridgeindex.chains.canonical_metadata import SOLANA_CHAIN_ID
from bridgeindex.domain.enums import ProviderName, TokenTag
from bridgeindex.domain.models import ProviderResponse
from bridgeindex.exceptions import ExternalServiceError, ProviderError
from bridgeindex.providers.base import ProviderAdapter, build_chain, build_token, parse_chain_id, strip_nul
from bridgeindex.providers.metadata import PROVIDER_INFO, get_provider_info
from bridgeindex.providers.registry import build_default_adapters
from bridgeindex.providers.relay import RelayAdapter


class _ExplodingAdapter(ProviderAdapter):
    name = "exploding"

    def __init__(self, exc: Exception) -> None:
        super().__init__()
        self._exc = exc

    async def _fetch(self) -> ProviderResponse:
        raise self._exc


class TestParseChainId:
    def test_int_passthrough(self):
        assert parse_chain_id(10) == 10

    def test_decimal_string(self):
        assert parse_chain_id("8453") == 8453

    def test_hex_string(self):
        assert parse_chain_id("0x1") == 1
        assert parse_chain_id("0xa4b1") == 42161

    def test_unparsable(self):
        assert parse_chain_id("SN_MAIN") is None
        assert parse_chain_id("") is None
        assert parse_chain_id(None) is None


class TestHelpers:
    def test_strip_nul(self):
        assert strip_nul("DAI\x00") == "DAI"
        assert strip_nul("A\x00B\x00C") == "ABC"

    def test_build_chain_placeholder_currency(self):
        chain = build_chain(1, "Ethereum")
        assert chain.native_currency.name == "Unknown"
        assert chain.native_currency.symbol == "Unknown"
        assert chain.native_currency.decimals == 18

    def test_build_token_evm_lowercases_and_tags(self):
        token = build_token(
            chain_id=1,
            address="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
            symbol="USDC",
            name="USD Coin",
            decimals=6,
        )
        assert token.address == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
        assert token.tags == [TokenTag.STABLECOIN]

    def test_build_token_evm_native_sentinel_canonicalized(self):
        token = build_token(
            chain_id=1,
            address="0xEeeeeEeeeEeEeeEeEeeeeEeEeeEeeEeeeeEEEeee",
            symbol="ETH",
            name="Ether",
        )
        assert token.address == "0x0000000000000000000000000000000000000000"
        assert token.tags == [TokenTag.NATIVE]
        assert token.decimals is None

    def test_build_token_solana_keeps_case(self):
        address = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
        token = build_token(chain_id=SOLANA_CHAIN_ID, address=address, symbol="USDC", name="USD Coin")
        assert token.address == address


class TestAdapterErrors:
    async def test_transport_error_wrapped(self):
        cause = ExternalServiceError("boom")
        with pytest.raises(ProviderError) as exc_info:
            await _ExplodingAdapter(cause).fetch()
        assert exc_info.value.provider == "exploding"
        assert exc_info.value.__cause__ is cause
        assert str(exc_info.value).startswith("[exploding]")

    async def test_unexpected_error_wrapped(self):
        with pytest.raises(ProviderError):
            await _ExplodingAdapter(KeyError("chains")).fetch()

    async def test_provider_error_not_double_wrapped(self):
        original = ProviderError("exploding", "already scoped")
        with pytest.raises(ProviderError) as exc_info:
            await _ExplodingAdapter(original).fetch()
        assert exc_info.value is original

    async def test_missing_http_client(self):
        with pytest.raises(ProviderError):
            await RelayAdapter().fetch()

    async def test_validation_error_is_cause(self, fake_http):
        http = fake_http({"https://api.relay.link/chains": {"chains": "not-a-list"}})
        with pytest.raises(ProviderError) as exc_info:
            await RelayAdapter(http).fetch()
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestRegistryAndInfo:
    def test_default_adapters_cover_every_provider(self, fake_http):
        adapters = build_default_adapters(fake_http({}))
        assert sorted(a.name for a in adapters) == sorted(p.value for p in ProviderName)

    def test_provider_info_for_every_provider(self):
        assert set(PROVIDER_INFO) == {p.value for p in ProviderName}

    def test_get_provider_info_case_insensitive(self):
        info = get_provider_info("RELAY")
        assert info is not None
        assert info.display_name == "Relay"
        assert info.website == "https://relay.link"

    def test_eco_has_no_api_endpoint(self):
        assert get_provider_info("eco").api_endpoint is None

    def test_unknown_provider(self):
        assert get_provider_info("wormhole") is None
