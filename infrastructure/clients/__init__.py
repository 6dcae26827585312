from .bank_client import BankClient
from .transaction_repo_api import TransactionRepoAPI

__all__ = ["BankClient", "TransactionRepoAPI"]
