# base_counter/domains/rewards/crypto_service.py
from typing import Optional

from eth_account import Account
from eth_account.messages import encode_defunct
from web3 import Web3

from base_counter.core.config import settings
from base_counter.shared.errors import ConfigurationError


class RewardSigner:
    """Signs (recipient, token, amount) payouts redeemable by the counter contract."""

    def __init__(self, private_key: Optional[str] = None):
        self._private_key = private_key

    def check_configured(self) -> None:
        if not (self._private_key or settings.SIGNER_PRIVATE_KEY):
            raise ConfigurationError("SIGNER_PRIVATE_KEY is not configured on the server")

    @property
    def private_key(self) -> str:
        self.check_configured()
        return self._private_key or settings.SIGNER_PRIVATE_KEY

    @property
    def address(self) -> str:
        return Account.from_key(self.private_key).address

    @staticmethod
    def payout_hash(recipient: str, token_address: str, amount_units: int) -> bytes:
        """keccak256(abi.encodePacked(address, address, uint256))"""
        return bytes(
            Web3.solidity_keccak(
                ["address", "address", "uint256"],
                [
                    Web3.to_checksum_address(recipient),
                    Web3.to_checksum_address(token_address),
                    amount_units,
                ],
            )
        )

    def sign(self, recipient: str, token_address: str, amount_units: int) -> str:
        # the contract applies toEthSignedMessageHash to the packed hash
        message = encode_defunct(primitive=self.payout_hash(recipient, token_address, amount_units))
        signed = Account.sign_message(message, private_key=self.private_key)
        return Web3.to_hex(signed.signature)


reward_signer = RewardSigner()
