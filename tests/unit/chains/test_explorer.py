from bridgeindex.chains.canonical_metadata import SOLANA_CHAIN_ID
from bridgeindex.chains.explorer import address_explorer_url, explorer_base_url, token_explorer_url
from bridgeindex.domain.models import Explorer

USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"


class TestExplorerLinks:
    def test_well_known_fallback(self):
        assert token_explorer_url(1, USDC) == f"https://etherscan.io/token/{USDC}"
        assert address_explorer_url(8453, USDC) == f"https://basescan.org/address/{USDC}"

    def test_stored_explorer_preferred(self):
        explorers = [{"name": "Blockscout", "url": "https://eth.blockscout.com/", "standard": "EIP3091"}]
        assert token_explorer_url(1, USDC, explorers) == f"https://eth.blockscout.com/token/{USDC}"

    def test_explorer_models_accepted(self):
        explorers = [Explorer(name="Hypurrscan", url="https://hypurrscan.io", standard="EIP3091")]
        assert explorer_base_url(999, explorers) == "https://hypurrscan.io"

    def test_solana_uses_account_path(self):
        owner = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
        assert address_explorer_url(SOLANA_CHAIN_ID, owner) == f"https://solscan.io/account/{owner}"

    def test_provider_solana_id_resolves(self):
        assert explorer_base_url(792703809) == "https://solscan.io"

    def test_unknown_chain(self):
        assert token_explorer_url(123456, USDC) is None
        assert address_explorer_url(123456, USDC) is None
