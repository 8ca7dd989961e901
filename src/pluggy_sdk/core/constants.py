from __future__ import annotations

from enum import StrEnum

DEFAULT_BASE_URL = "https://api.pluggy.ai"
API_KEY_HEADER = "X-API-KEY"


class ConnectorType(StrEnum):
    PERSONAL_BANK = "PERSONAL_BANK"
    BUSINESS_BANK = "BUSINESS_BANK"
    INVOICE = "INVOICE"
    INVESTMENT = "INVESTMENT"
    TELECOMMUNICATION = "TELECOMMUNICATION"
    DIGITAL_ECONOMY = "DIGITAL_ECONOMY"
    PAYMENT_ACCOUNT = "PAYMENT_ACCOUNT"
    OTHER = "OTHER"


class Country(StrEnum):
    AR = "AR"
    BR = "BR"


class CredentialType(StrEnum):
    NUMBER = "number"
    PASSWORD = "password"
    TEXT = "text"
    IMAGE = "image"
    SELECT = "select"
    ETH_ADDRESS = "ethaddress"


class ConnectorStatus(StrEnum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    UNSTABLE = "UNSTABLE"


class ConnectorStage(StrEnum):
    BETA = "BETA"


class ProductType(StrEnum):
    ACCOUNTS = "ACCOUNTS"
    CREDIT_CARDS = "CREDIT_CARDS"
    TRANSACTIONS = "TRANSACTIONS"
    PAYMENT_DATA = "PAYMENT_DATA"
    INVESTMENTS = "INVESTMENTS"
    INVESTMENTS_TRANSACTIONS = "INVESTMENTS_TRANSACTIONS"
    IDENTITY = "IDENTITY"
    BROKERAGE_NOTE = "BROKERAGE_NOTE"
    OPPORTUNITIES = "OPPORTUNITIES"
    PORTFOLIO = "PORTFOLIO"
    INCOME_REPORTS = "INCOME_REPORTS"


class ItemStatus(StrEnum):
    UPDATED = "UPDATED"
    UPDATING = "UPDATING"
    WAITING_USER_INPUT = "WAITING_USER_INPUT"
    LOGIN_ERROR = "LOGIN_ERROR"
    OUTDATED = "OUTDATED"


class ExecutionStatus(StrEnum):
    # In-progress phases
    LOGIN_IN_PROGRESS = "LOGIN_IN_PROGRESS"
    WAITING_USER_INPUT = "WAITING_USER_INPUT"
    WAITING_USER_ACTION = "WAITING_USER_ACTION"
    LOGIN_MFA_IN_PROGRESS = "LOGIN_MFA_IN_PROGRESS"
    ACCOUNTS_IN_PROGRESS = "ACCOUNTS_IN_PROGRESS"
    TRANSACTIONS_IN_PROGRESS = "TRANSACTIONS_IN_PROGRESS"
    PAYMENT_DATA_IN_PROGRESS = "PAYMENT_DATA_IN_PROGRESS"
    CREDITCARDS_IN_PROGRESS = "CREDITCARDS_IN_PROGRESS"
    INVESTMENTS_IN_PROGRESS = "INVESTMENTS_IN_PROGRESS"
    INVESTMENTS_TRANSACTIONS_IN_PROGRESS = "INVESTMENTS_TRANSACTIONS_IN_PROGRESS"
    OPPORTUNITIES_IN_PROGRESS = "OPPORTUNITIES_IN_PROGRESS"
    IDENTITY_IN_PROGRESS = "IDENTITY_IN_PROGRESS"
    CREATING = "CREATING"

    # Terminal phases
    MERGE_ERROR = "MERGE_ERROR"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"
    PARTIAL_SUCCESS = "PARTIAL_SUCCESS"
    CREATE_ERROR = "CREATE_ERROR"
    CREATED = "CREATED"


class ExecutionErrorCode(StrEnum):
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ALREADY_LOGGED_IN = "ALREADY_LOGGED_IN"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"
    INVALID_CREDENTIALS_MFA = "INVALID_CREDENTIALS_MFA"
    SITE_NOT_AVAILABLE = "SITE_NOT_AVAILABLE"
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"
    ACCOUNT_CREDENTIALS_RESET = "ACCOUNT_CREDENTIALS_RESET"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    ACCOUNT_NEEDS_ACTION = "ACCOUNT_NEEDS_ACTION"
    USER_AUTHORIZATION_PENDING = "USER_AUTHORIZATION_PENDING"
    USER_AUTHORIZATION_NOT_GRANTED = "USER_AUTHORIZATION_NOT_GRANTED"
    USER_INPUT_TIMEOUT = "USER_INPUT_TIMEOUT"


class WebhookEvent(StrEnum):
    ITEM_CREATED = "item/created"
    ITEM_UPDATED = "item/updated"
    ITEM_ERROR = "item/error"
    ITEM_DELETED = "item/deleted"
    ITEM_WAITING_USER_INPUT = "item/waiting_user_input"
    ITEM_LOGIN_SUCCEEDED = "item/login_succeeded"
    CONNECTOR_STATUS_UPDATED = "connector/status_updated"
    TRANSACTIONS_DELETED = "transactions/deleted"
    ALL = "all"
