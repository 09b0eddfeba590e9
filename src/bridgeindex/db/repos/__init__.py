from bridgeindex.db.repos.chain_repo import ChainRepo
from bridgeindex.db.repos.fetch_repo import ProviderFetchRepo
from bridgeindex.db.repos.token_repo import TokenRepo

__all__ = ["ChainRepo", "ProviderFetchRepo", "TokenRepo"]
