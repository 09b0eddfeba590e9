from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from bridgeindex.aggregation.chain_mapping import normalize_chain_id
from bridgeindex.api.deps import get_db
from bridgeindex.api.schemas.chains import ChainResponse, TokenList, TokenResponse
from bridgeindex.chains.explorer import explorer_base_url, token_explorer_url
from bridgeindex.db.repos.chain_repo import ChainRepo
from bridgeindex.db.repos.token_repo import TokenRepo

router = APIRouter(prefix="/api/chains", tags=["chains"])

DbDep = Annotated[AsyncSession, Depends(get_db)]


@router.get("/{chain_id}", response_model=ChainResponse)
async def get_chain(chain_id: int, db: DbDep) -> ChainResponse:
    """Chain by canonical ID. Provider-specific IDs (e.g. Relay's Solana ID) are accepted too."""
    repo = ChainRepo(db)
    chain = await repo.get_by_id(normalize_chain_id(chain_id))
    if chain is None:
        raise HTTPException(status_code=404, detail=f"Chain {chain_id} not found")

    response = ChainResponse.model_validate(chain)
    response.providers = await repo.list_providers_for_chain(chain.chain_id)
    response.explorer_url = explorer_base_url(chain.chain_id, chain.explorers)
    return response


@router.get("/{chain_id}/tokens", response_model=TokenList)
async def list_chain_tokens(chain_id: int, provider: str, db: DbDep) -> TokenList:
    canonical_id = normalize_chain_id(chain_id)
    chain = await ChainRepo(db).get_by_id(canonical_id)
    explorers: Optional[list] = chain.explorers if chain is not None else None

    tokens = await TokenRepo(db).list_for_provider(provider.lower(), chain_id=canonical_id)
    items = []
    for token in tokens:
        item = TokenResponse.model_validate(token)
        item.explorer_url = token_explorer_url(token.chain_id, token.address, explorers)
        items.append(item)
    return TokenList(tokens=items, total=len(items))
