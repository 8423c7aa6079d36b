"""Testes para smsru.domain.requests."""

from __future__ import annotations

import pytest

from smsru.domain.requests import (
    CHECK_STATUS_MAX_SMS_IDS,
    SEND_SMS_MAX_RECIPIENTS,
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCost,
    CheckStatus,
    PerRecipient,
    RemoveStoplistEntry,
    ResponseFormat,
    SendOptions,
    SendSms,
    StartCallAuth,
    ToMany,
    ensure_json_format,
)
from smsru.domain.values import (
    CallbackUrl,
    CallCheckId,
    MessageText,
    PhoneNumber,
    RawPhoneNumber,
    SmsId,
    UnixTimestamp,
)
from smsru.utils.errors import UnsupportedResponseFormatError, ValidationError


def _phones(count: int) -> list[str]:
    return [f"7925{index:07d}" for index in range(count)]


class TestSendSmsToMany:
    """Limite de 1..100 destinatários sobre a entrada literal."""

    def test_zero_recipients_fails(self) -> None:
        with pytest.raises(ValidationError):
            SendSms.to_many([], "hi")

    def test_exactly_limit_succeeds(self) -> None:
        request = SendSms.to_many(_phones(SEND_SMS_MAX_RECIPIENTS), "hi")
        assert len(request.recipients) == 100

    def test_over_limit_fails(self) -> None:
        with pytest.raises(ValidationError):
            SendSms.to_many(_phones(SEND_SMS_MAX_RECIPIENTS + 1), "hi")

    def test_duplicates_count_toward_limit(self) -> None:
        with pytest.raises(ValidationError):
            SendSms.to_many(["79251234567"] * 101, "hi")

    def test_duplicates_kept_in_order(self) -> None:
        request = SendSms.to_many(["79990000002", "79990000001", "79990000002"], "hi")
        assert [p.value for p in request.recipients] == ["79990000002", "79990000001", "79990000002"]

    def test_accepts_domain_values(self) -> None:
        phone = PhoneNumber.parse("89251234567", "RU")
        request = SendSms.to_many([phone, RawPhoneNumber("79990000001")], MessageText("hi"))
        assert request.recipients == (RawPhoneNumber("+79251234567"), RawPhoneNumber("79990000001"))

    def test_shape_is_to_many(self) -> None:
        request = SendSms.to_many(["79251234567"], "hi")
        assert isinstance(request.shape, ToMany)
        assert request.shape.message == MessageText("hi")

    def test_invalid_message_fails(self) -> None:
        with pytest.raises(ValidationError):
            SendSms.to_many(["79251234567"], "   ")

    def test_default_options(self) -> None:
        assert SendSms.to_many(["79251234567"], "hi").options == SendOptions()


class TestSendSmsPerRecipient:
    def test_mapping_sorted_by_phone(self) -> None:
        request = SendSms.per_recipient({"79990000002": "b", "79990000001": "a"})
        assert isinstance(request.shape, PerRecipient)
        assert [(p.value, t.value) for p, t in request.shape.messages] == [
            ("79990000001", "a"),
            ("79990000002", "b"),
        ]

    def test_duplicate_keys_keep_last_value(self) -> None:
        request = SendSms.per_recipient([("79990000001", "first"), (" 79990000001 ", "last")])
        assert request.shape.as_dict() == {RawPhoneNumber("79990000001"): MessageText("last")}

    def test_empty_mapping_fails(self) -> None:
        with pytest.raises(ValidationError):
            SendSms.per_recipient({})

    def test_limit_applies_to_resulting_mapping(self) -> None:
        pairs = [(phone, "x") for phone in _phones(100)] + [(_phones(1)[0], "y")]
        request = SendSms.per_recipient(pairs)
        assert len(request.recipients) == 100

    def test_over_limit_fails(self) -> None:
        with pytest.raises(ValidationError):
            SendSms.per_recipient({phone: "x" for phone in _phones(101)})


class TestCheckCost:
    def test_to_many(self) -> None:
        request = CheckCost.to_many(["79251234567"], "hi")
        assert request.recipients == (RawPhoneNumber("79251234567"),)

    def test_per_recipient_limit(self) -> None:
        with pytest.raises(ValidationError):
            CheckCost.per_recipient({phone: "x" for phone in _phones(101)})


class TestCheckStatus:
    def test_one(self) -> None:
        assert CheckStatus.one(" 000-1 ").sms_ids == (SmsId("000-1"),)

    def test_limits(self) -> None:
        ids = [f"id-{index}" for index in range(CHECK_STATUS_MAX_SMS_IDS)]
        assert len(CheckStatus(tuple(ids)).sms_ids) == 100
        with pytest.raises(ValidationError):
            CheckStatus((*ids, "extra"))
        with pytest.raises(ValidationError):
            CheckStatus(())


class TestSingleValueInsteadOfCollection:
    """Valor avulso no lugar de lote é rejeitado, nunca fatiado em caracteres."""

    @pytest.mark.parametrize(
        "recipients",
        ["79251234567", RawPhoneNumber("79251234567"), PhoneNumber.parse("+79251234567", None)],
    )
    def test_send_sms_to_many(self, recipients: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SendSms.to_many(recipients, "hi")  # type: ignore[arg-type]
        assert exc_info.value.field == "to"

    def test_check_cost_to_many(self) -> None:
        with pytest.raises(ValidationError):
            CheckCost.to_many("79251234567", "hi")  # type: ignore[arg-type]

    def test_to_many_shape_direct(self) -> None:
        with pytest.raises(ValidationError):
            ToMany("79251234567", MessageText("hi"))  # type: ignore[arg-type]

    def test_per_recipient_string(self) -> None:
        with pytest.raises(ValidationError):
            PerRecipient("79251234567")  # type: ignore[arg-type]

    @pytest.mark.parametrize("sms_ids", ["id-1", SmsId("id-1"), 42])
    def test_check_status(self, sms_ids: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CheckStatus(sms_ids)  # type: ignore[arg-type]
        assert exc_info.value.field == "sms_id"

    def test_list_of_one_still_accepted(self) -> None:
        assert SendSms.to_many(["79251234567"], "hi").recipients == (
            RawPhoneNumber("79251234567"),
        )
        assert CheckStatus(["id-1"]).sms_ids == (SmsId("id-1"),)  # type: ignore[arg-type]


class TestSingleItemRequests:
    def test_start_call_auth_coerces_phone(self) -> None:
        assert StartCallAuth(" 79251234567 ").phone == RawPhoneNumber("79251234567")

    def test_check_call_auth_status(self) -> None:
        assert CheckCallAuthStatus("201737-542").check_id == CallCheckId("201737-542")

    def test_stoplist_entry(self) -> None:
        entry = AddStoplistEntry("79251234567", " fraud ")
        assert entry.text.value == "fraud"
        assert RemoveStoplistEntry("79251234567").phone.value == "79251234567"

    def test_stoplist_entry_requires_text(self) -> None:
        with pytest.raises(ValidationError):
            AddStoplistEntry("79251234567", "")

    def test_callback_url_validated(self) -> None:
        assert AddCallback("https://example.com/cb").url == CallbackUrl("https://example.com/cb")
        with pytest.raises(ValidationError):
            AddCallback("ftp://example.com/cb")

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StartCallAuth(79251234567)  # type: ignore[arg-type]


class TestOptions:
    def test_daytime_supersedes_time(self) -> None:
        options = SendOptions(time=UnixTimestamp(1700000000), daytime=True)
        assert options.effective_time is None
        assert options.time == UnixTimestamp(1700000000)

    def test_time_kept_without_daytime(self) -> None:
        options = SendOptions(time=UnixTimestamp(1700000000))
        assert options.effective_time == UnixTimestamp(1700000000)

    def test_plain_format_rejected(self) -> None:
        with pytest.raises(UnsupportedResponseFormatError):
            ensure_json_format(ResponseFormat.PLAIN)

    def test_unsupported_format_is_validation_error(self) -> None:
        assert issubclass(UnsupportedResponseFormatError, ValidationError)
        assert issubclass(UnsupportedResponseFormatError, ValueError)

    def test_json_format_accepted(self) -> None:
        ensure_json_format(ResponseFormat.JSON)
