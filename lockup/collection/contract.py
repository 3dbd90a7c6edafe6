# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from structlog import get_logger

from lockup.boc import Address, Cell, StateInit, contract_address
from lockup.collection.config import collection_config_to_cell
from lockup.collection.messages import Opcode, build_batch_mint_body, build_deploy_body, build_mint_body
from lockup.collection.provider import ContractProvider, Sender, SendMode
from lockup.collection.types import CollectionConfig, CollectionMint
from lockup.conf.get_settings import get_global_settings

logger = get_logger()


@dataclass(slots=True, frozen=True)
class NftCollection:
    """ A lockup NFT collection contract, either already deployed or about to be.

    `init` is only known when the collection was created from its config, it's what has to go along with the deploy
    message. Messages are encoded here and handed over to a `ContractProvider`, which is responsible for delivering
    them; encoding errors are always raised before the provider is called.
    """

    address: Address
    init: Optional[StateInit] = None

    @classmethod
    def create_from_address(cls, address: Address) -> 'NftCollection':
        return cls(address)

    @classmethod
    def create_from_config(
        cls,
        config: CollectionConfig,
        code: Cell,
        workchain: Optional[int] = None,
    ) -> 'NftCollection':
        """Compute the initial state of a new collection and the address it will be deployed at."""
        if workchain is None:
            workchain = get_global_settings().DEFAULT_WORKCHAIN
        data = collection_config_to_cell(config)
        init = StateInit(code=code, data=data)
        return cls(contract_address(workchain, init), init)

    async def _send(
        self,
        provider: ContractProvider,
        via: Sender,
        *,
        value: int,
        body: Cell,
        op: Optional[Opcode],
    ) -> Any:
        log = logger.new(collection=self.address.to_raw_string())
        log.debug('sending message', op=op.name if op is not None else 'deploy', value=value,
                  bits=len(body.bits), refs=len(body.refs))
        return await provider.internal(via, value=value, send_mode=SendMode.PAY_GAS_SEPARATELY, body=body)

    async def send_deploy(self, provider: ContractProvider, via: Sender, value: int) -> Any:
        return await self._send(provider, via, value=value, body=build_deploy_body(), op=None)

    async def send_mint_nft(
        self,
        provider: ContractProvider,
        via: Sender,
        *,
        value: int,
        query_id: int,
        item_index: int,
        item_owner_address: Optional[Address],
        item_content: str,
        amount: int,
    ) -> Any:
        body = build_mint_body(
            query_id=query_id,
            item_index=item_index,
            amount=amount,
            item_owner_address=item_owner_address,
            item_content=item_content,
        )
        return await self._send(provider, via, value=value, body=body, op=Opcode.MINT)

    async def send_batch_mint(
        self,
        provider: ContractProvider,
        via: Sender,
        *,
        value: int,
        query_id: int,
        nfts: Sequence[CollectionMint],
    ) -> Any:
        body = build_batch_mint_body(query_id=query_id, nfts=nfts)
        return await self._send(provider, via, value=value, body=body, op=Opcode.BATCH_MINT)
