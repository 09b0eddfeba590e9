from bridgeindex.domain.enums import TokenTag
from bridgeindex.providers import gaszip, meson, rhino
from bridgeindex.providers.gaszip import GasZipAdapter
from bridgeindex.providers.meson import MesonAdapter
from bridgeindex.providers.rhino import RhinoAdapter

ZERO = "0x0000000000000000000000000000000000000000"
USDT = "0xdAC17F958D2ee523a2206206994597C13D831ec7"


class TestRhinoAdapter:
    async def test_maps_configs(self, fake_http):
        payload = {
            "ETHEREUM": {
                "name": "Ethereum",
                "networkId": 1,
                "tokens": {
                    "USDT": {"token": "Tether USD", "address": USDT, "decimals": 6},
                    "ETH": {"address": ZERO},
                    "BROKEN": {"address": ""},
                },
            },
            "ARBITRUM_ONE": {"name": "Arbitrum", "networkId": "42161"},
            "STARKNET": {"name": "Starknet", "networkId": "SN_MAIN"},
            "PARADEX": {"name": "Paradex", "networkId": ""},
        }
        result = await RhinoAdapter(fake_http({rhino.CONFIGS_URL: payload})).fetch()

        assert [c.id for c in result.chains] == [1, 42161]
        assert [t.symbol for t in result.tokens] == ["USDT", "ETH"]
        usdt, eth = result.tokens
        assert usdt.name == "Tether USD"
        assert usdt.decimals == 6
        assert usdt.address == USDT.lower()
        # symbol stands in for the missing name; missing decimals stay unknown
        assert eth.name == "ETH"
        assert eth.decimals is None
        assert eth.tags == [TokenTag.NATIVE]


class TestGasZipAdapter:
    async def test_mainnet_native_tokens(self, fake_http):
        payload = {
            "chains": [
                {"name": "Ethereum", "chain": 1, "symbol": "ETH", "decimals": 18, "mainnet": True},
                {"name": "Sepolia", "chain": 11155111, "symbol": "ETH", "decimals": 18, "mainnet": False},
                {"name": "Polygon", "chain": 137, "symbol": "POL", "decimals": 18, "mainnet": True},
            ]
        }
        result = await GasZipAdapter(fake_http({gaszip.CHAINS_URL: payload})).fetch()

        assert [c.id for c in result.chains] == [1, 137]
        assert result.chains[1].native_currency.symbol == "POL"
        assert result.chains[1].native_currency.name == "POL"
        assert len(result.tokens) == 2
        assert all(t.address == ZERO for t in result.tokens)
        assert all(TokenTag.NATIVE in t.tags for t in result.tokens)
        assert result.tokens[1].name == "POL"


class TestMesonAdapter:
    async def test_hex_and_decimal_chain_ids(self, fake_http):
        payload = {
            "result": [
                {
                    "id": "eth",
                    "name": "Ethereum",
                    "chainId": "0x1",
                    "tokens": [
                        {"id": "usdc", "addr": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"},
                        {"id": "eth"},
                    ],
                },
                {
                    "id": "bnb",
                    "name": "BNB Chain",
                    "chainId": "56",
                    "tokens": [{"id": "usdt", "addr": "0x55d398326f99059fF775485246999027B3197955"}],
                },
                {"id": "weird", "name": "Weird", "chainId": "zz", "tokens": []},
            ]
        }
        result = await MesonAdapter(fake_http({meson.LIST_URL: payload})).fetch()

        assert [c.id for c in result.chains] == [1, 56]
        assert [(t.symbol, t.chain_id) for t in result.tokens] == [("USDC", 1), ("USDT", 56)]
        assert result.tokens[0].name == "USDC"
        assert result.tokens[0].decimals is None
