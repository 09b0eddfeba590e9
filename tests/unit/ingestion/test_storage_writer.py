import pytest
from sqlalchemy import func, select

from bridgeindex.chains.canonical_metadata import SOLANA_CHAIN_ID
from bridgeindex.db.models import Chain, ChainProviderSupport, ProviderFetch, Token
from bridgeindex.db.repos.chain_repo import ChainRepo
from bridgeindex.db.repos.token_repo import TokenRepo
from bridgeindex.domain.enums import TokenTag
from bridgeindex.domain.models import ChainData, NativeCurrency, TokenData
from bridgeindex.exceptions import StorageError
from bridgeindex.ingestion.storage import ProviderStorageWriter, chunked, dedupe_tokens, token_row, unique_chains


def _token(chain_id: int, address: str, symbol: str, **extra) -> TokenData:
    return TokenData(address=address, symbol=symbol, name=symbol, chain_id=chain_id, **extra)


async def _all(session_factory, model):
    async with session_factory() as session:
        result = await session.execute(select(model))
        return list(result.scalars().all())


class TestHelpers:
    def test_dedupe_last_wins(self):
        tokens = [_token(1, "0xa", "FIRST"), _token(10, "0xa", "OTHER"), _token(1, "0xa", "LAST")]
        deduped = dedupe_tokens(tokens)
        assert len(deduped) == 2
        assert {t.symbol for t in deduped} == {"LAST", "OTHER"}

    def test_unique_chains_first_wins(self):
        chains = [ChainData(id=1, name="Ethereum"), ChainData(id=1, name="Chain 1")]
        assert [c.name for c in unique_chains(chains)] == ["Ethereum"]

    def test_chunked(self):
        assert list(chunked([1, 2, 3, 4, 5], 2)) == [[1, 2], [3, 4], [5]]

    def test_token_row_raw_data(self):
        row = token_row(_token(1, "0xa", "USDC", decimals=6, tags=[TokenTag.STABLECOIN]))
        assert row["tags"] == ["stablecoin"]
        assert row["raw_data"]["symbol"] == "USDC"
        assert row["raw_data"]["tags"] == ["stablecoin"]


class TestProviderStorageWriter:
    async def test_store_success(self, session_factory):
        writer = ProviderStorageWriter(session_factory)
        chains = [
            ChainData(id=1, name="Ethereum", native_currency=NativeCurrency(name="Ether", symbol="ETH", decimals=18)),
            ChainData(id=10, name="Optimism"),
        ]
        tokens = [_token(1, "0xa", "USDC", decimals=6), _token(10, "0xb", "WETH", decimals=18)]

        fetch_id = await writer.store("across", chains, tokens)

        (fetch,) = await _all(session_factory, ProviderFetch)
        assert fetch.id == fetch_id
        assert fetch.success is True
        assert fetch.chains_count == 2
        assert fetch.tokens_count == 2
        assert len(await _all(session_factory, Chain)) == 2
        links = await _all(session_factory, ChainProviderSupport)
        assert {(link.chain_id, link.provider_name, link.fetch_id) for link in links} == {
            (1, "across", fetch_id),
            (10, "across", fetch_id),
        }
        assert {t.symbol for t in await _all(session_factory, Token)} == {"USDC", "WETH"}

    async def test_refetch_is_idempotent(self, session_factory):
        writer = ProviderStorageWriter(session_factory)
        chains = [ChainData(id=1, name="Ethereum")]
        tokens = [_token(1, "0xa", "USDC")]

        await writer.store("eco", chains, tokens)
        second = await writer.store("eco", chains, [_token(1, "0xa", "USDC", decimals=6)])

        assert len(await _all(session_factory, ProviderFetch)) == 2
        (link,) = await _all(session_factory, ChainProviderSupport)
        assert link.fetch_id == second
        (token,) = await _all(session_factory, Token)
        assert token.decimals == 6
        assert token.fetch_id == second

    async def test_chain_fields_not_overwritten_by_other_provider(self, session_factory):
        writer = ProviderStorageWriter(session_factory)
        await writer.store("relay", [ChainData(id=1, name="Ethereum")], [])
        await writer.store("lifi", [ChainData(id=1, name="Chain 1")], [])

        (chain,) = await _all(session_factory, Chain)
        assert chain.name == "Ethereum"
        assert len(await _all(session_factory, ChainProviderSupport)) == 2

    async def test_canonical_metadata_preferred(self, session_factory):
        writer = ProviderStorageWriter(session_factory)
        await writer.store("relay", [ChainData(id=SOLANA_CHAIN_ID, name="solana", vm_type="svm")], [])

        (chain,) = await _all(session_factory, Chain)
        assert chain.name == "Solana"
        assert chain.short_name == "sol"
        assert chain.vm_type == "svm"
        assert chain.native_currency_symbol == "SOL"
        assert chain.native_currency_decimals == 9
        assert chain.explorers[0]["url"] == "https://solscan.io"

    async def test_batches_and_dedupes_within_batch(self, session_factory, monkeypatch):
        batch_sizes: list[int] = []
        original = TokenRepo.upsert_tokens

        async def spy(self, provider, rows, fetch_id):
            batch_sizes.append(len(rows))
            await original(self, provider, rows, fetch_id)

        monkeypatch.setattr(TokenRepo, "upsert_tokens", spy)
        writer = ProviderStorageWriter(session_factory, batch_size=3)
        tokens = [
            _token(1, "0xa", "A1"),
            _token(1, "0xa", "A2"),
            _token(1, "0xb", "B"),
            _token(1, "0xc", "C"),
            _token(1, "0xd", "D"),
        ]

        await writer.store("lifi", [ChainData(id=1, name="Ethereum")], tokens)

        assert batch_sizes == [2, 2]
        stored = {t.address: t.symbol for t in await _all(session_factory, Token)}
        assert stored == {"0xa": "A2", "0xb": "B", "0xc": "C", "0xd": "D"}
        (fetch,) = await _all(session_factory, ProviderFetch)
        assert fetch.tokens_count == 5

    async def test_chain_failure_rolls_back_and_is_recorded(self, session_factory, monkeypatch):
        async def explode(self, rows):
            raise RuntimeError("disk full")

        monkeypatch.setattr(ChainRepo, "upsert_chains", explode)
        writer = ProviderStorageWriter(session_factory)

        with pytest.raises(StorageError) as exc_info:
            await writer.store("stargate", [ChainData(id=1, name="Ethereum")], [_token(1, "0xa", "USDC")])

        assert exc_info.value.provider == "stargate"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        (fetch,) = await _all(session_factory, ProviderFetch)
        assert fetch.success is False
        assert fetch.error_message == "disk full"
        assert await _all(session_factory, Token) == []

    async def test_record_failure(self, session_factory):
        writer = ProviderStorageWriter(session_factory)
        fetch_id = await writer.record_failure("mayan", "[mayan] Fetch operation failed: timeout")

        async with session_factory() as session:
            count = (await session.execute(select(func.count(ProviderFetch.id)))).scalar_one()
        assert count == 1
        assert fetch_id is not None

    async def test_chains_written_in_ascending_id_order(self, session_factory, monkeypatch):
        upserted: list[list[int]] = []
        linked: list[list[int]] = []
        original_upsert = ChainRepo.upsert_chains
        original_link = ChainRepo.link_chain_provider_support

        async def spy_upsert(self, rows):
            upserted.append([row["chain_id"] for row in rows])
            await original_upsert(self, rows)

        async def spy_link(self, chain_ids, provider, fetch_id):
            linked.append(list(chain_ids))
            await original_link(self, chain_ids, provider, fetch_id)

        monkeypatch.setattr(ChainRepo, "upsert_chains", spy_upsert)
        monkeypatch.setattr(ChainRepo, "link_chain_provider_support", spy_link)
        chains = [
            ChainData(id=8453, name="Base"),
            ChainData(id=1, name="Ethereum"),
            ChainData(id=SOLANA_CHAIN_ID, name="Solana"),
            ChainData(id=10, name="Optimism"),
            ChainData(id=1, name="Chain 1"),
        ]

        await ProviderStorageWriter(session_factory).store("relay", chains, [])

        assert upserted == [[1, 10, 8453, SOLANA_CHAIN_ID]]
        assert linked == [[1, 10, 8453, SOLANA_CHAIN_ID]]
        (chain,) = [c for c in await _all(session_factory, Chain) if c.chain_id == 1]
        assert chain.name == "Ethereum"

    async def test_token_failure_marks_committed_attempt_failed(self, session_factory, monkeypatch):
        async def explode(self, provider, rows, fetch_id):
            raise RuntimeError("disk full")

        monkeypatch.setattr(TokenRepo, "upsert_tokens", explode)
        writer = ProviderStorageWriter(session_factory)

        with pytest.raises(StorageError) as exc_info:
            await writer.store("lifi", [ChainData(id=1, name="Ethereum")], [_token(1, "0xa", "USDC")])

        assert exc_info.value.provider == "lifi"
        (fetch,) = await _all(session_factory, ProviderFetch)
        assert fetch.success is False
        assert fetch.error_message == "disk full"
        assert fetch.chains_count == 1
        assert [c.chain_id for c in await _all(session_factory, Chain)] == [1]
        (link,) = await _all(session_factory, ChainProviderSupport)
        assert link.fetch_id == fetch.id
        assert await _all(session_factory, Token) == []
