from pydantic import BaseModel, ConfigDict, Field

from domain.entities import FetchResult, Transaction


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AmountResponse(_CamelModel):
    value: str
    unit: str


class HolderResponse(_CamelModel):
    holder_name: str = Field(alias="holderName")


class TransactionTypeResponse(_CamelModel):
    key: str
    text: str


class TransactionResponse(_CamelModel):
    reference: str
    booking_status: str = Field(alias="bookingStatus")
    booking_date: str = Field(alias="bookingDate")
    amount: AmountResponse
    remitter: HolderResponse
    debtor: HolderResponse
    creditor: HolderResponse
    valuta_date: str = Field(alias="valutaDate")
    end_to_end_reference: str = Field(alias="endToEndReference")
    new_transaction: bool = Field(alias="newTransaction")
    remittance_info: str = Field(alias="remittanceInfo")
    transaction_type: TransactionTypeResponse = Field(alias="transactionType")

    @staticmethod
    def from_entity(t: Transaction) -> 'TransactionResponse':
        def holder(name: str) -> HolderResponse:
            return HolderResponse(holder_name=name)

        return TransactionResponse(
            reference=t.reference,
            booking_status=t.booking_status.value,
            booking_date=t.booking_date,
            amount=AmountResponse(value=t.amount.formatted(), unit=t.amount.unit),
            remitter=holder(t.remitter_name),
            debtor=holder(t.debtor_name),
            creditor=holder(t.creditor_name),
            valuta_date=t.valuta_date,
            end_to_end_reference=t.end_to_end_reference,
            new_transaction=t.new_transaction,
            remittance_info=t.remittance_info,
            transaction_type=TransactionTypeResponse(key=t.transaction_type.key, text=t.transaction_type.text),
        )


class PagingResponse(_CamelModel):
    index: int
    matches: int


class AccountTransactionsResponse(_CamelModel):
    paging: PagingResponse
    values: list[TransactionResponse]

    @staticmethod
    def from_result(result: FetchResult) -> 'AccountTransactionsResponse':
        return AccountTransactionsResponse(
            paging=PagingResponse(index=result.page.paging.index, matches=result.page.paging.matches),
            values=[TransactionResponse.from_entity(t) for t in result.page.values],
        )
