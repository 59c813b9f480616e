"""
test_channels.py — Tests for the built-in notification channels.

Covers:
    • Exact pt_BR blocks for every channel × operation
    • English bundle wording and separators
    • Amount formatting (rounding, thousands, negatives)
    • Render-before-write behaviour and missing templates

Run with:
    pytest tests/test_channels.py -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from notification_hub.core.errors import TemplateNotFoundError
from notification_hub.notifications.channels import (
    BUILTIN_CHANNELS,
    EmailChannel,
    NotificationChannel,
    PushChannel,
    SmsChannel,
    WhatsAppChannel,
)
from notification_hub.notifications.models import (
    ChannelContext,
    MessageTemplate,
    NotificationKind,
)
from notification_hub.notifications.output import MemorySink
from notification_hub.notifications.templates import LOCALES, get_locale


# ═══════════════════════════════════════════════════════════════════════════
# Test Fixtures
# ═══════════════════════════════════════════════════════════════════════════

def _make_channel(cls, locale: str = "pt_BR"):
    sink = MemorySink()
    return cls(ChannelContext(sink=sink, locale=locale)), sink


class _PartialChannel(NotificationChannel):
    """Only knows how to confirm orders, and only in pt_BR."""
    key = "partial"
    label = "Partial"

    def templates(self):
        return {
            "pt_BR": {
                NotificationKind.ORDER_CONFIRMATION: MessageTemplate("ok {order_number}"),
            },
        }


# ═══════════════════════════════════════════════════════════════════════════
# Section 1: pt_BR blocks
# ═══════════════════════════════════════════════════════════════════════════

class TestEmailChannel:
    """Email prints a subject line."""

    def test_order_confirmation(self):
        channel, sink = _make_channel(EmailChannel)
        channel.send_order_confirmation("a@b.com", "1001")
        assert sink.lines == [
            "Email para a@b.com",
            "Assunto: Confirmação de Pedido",
            "Mensagem: Seu pedido 1001 foi confirmado!",
        ]

    def test_shipping_update(self):
        channel, sink = _make_channel(EmailChannel)
        channel.send_shipping_update("a@b.com", "TRK42")
        assert sink.lines == [
            "Email para a@b.com",
            "Assunto: Pedido Enviado",
            "Mensagem: Rastreamento TRK42",
        ]

    def test_payment_reminder(self):
        channel, sink = _make_channel(EmailChannel)
        channel.send_payment_reminder("a@b.com", Decimal("150"))
        assert sink.lines == [
            "Email para a@b.com",
            "Assunto: Lembrete de Pagamento",
            "Mensagem: Pagamento pendente R$ 150,00",
        ]

    def test_returns_none(self):
        channel, _ = _make_channel(EmailChannel)
        assert channel.send_order_confirmation("a@b.com", "1") is None


class TestSmsChannel:
    """SMS has no subject/title line."""

    def test_shipping_update(self):
        channel, sink = _make_channel(SmsChannel)
        channel.send_shipping_update("+15551234567", "TRK42")
        assert sink.lines == [
            "SMS para +15551234567",
            "Mensagem: Rastreamento TRK42",
        ]

    def test_order_confirmation(self):
        channel, sink = _make_channel(SmsChannel)
        channel.send_order_confirmation("+5511999999999", "12346")
        assert sink.lines == [
            "SMS para +5511999999999",
            "Mensagem: Pedido 12346 confirmado!",
        ]

    def test_payment_reminder(self):
        channel, sink = _make_channel(SmsChannel)
        channel.send_payment_reminder("+5511", 10)
        assert sink.lines[-1] == "Mensagem: Pagamento pendente R$ 10,00"


class TestPushChannel:
    """Push prints a title line."""

    def test_payment_reminder(self):
        channel, sink = _make_channel(PushChannel)
        channel.send_payment_reminder("device-xyz", 150.00)
        assert sink.lines == [
            "Push para device-xyz",
            "Título: Pagamento Pendente",
            "Mensagem: Valor R$ 150,00",
        ]

    def test_order_confirmation(self):
        channel, sink = _make_channel(PushChannel)
        channel.send_order_confirmation("device-xyz", "77")
        assert sink.lines == [
            "Push para device-xyz",
            "Título: Pedido Confirmado",
            "Mensagem: Pedido 77 confirmado!",
        ]

    def test_shipping_update(self):
        channel, sink = _make_channel(PushChannel)
        channel.send_shipping_update("device-token-abc123", "BR123456789")
        assert sink.lines == [
            "Push para device-token-abc123",
            "Título: Pedido Enviado",
            "Mensagem: Rastreamento BR123456789",
        ]


class TestWhatsAppChannel:
    """WhatsApp mirrors SMS wording under its own header."""

    def test_payment_reminder(self):
        channel, sink = _make_channel(WhatsAppChannel)
        channel.send_payment_reminder("+5511888888888", Decimal("150.00"))
        assert sink.lines == [
            "WhatsApp para +5511888888888",
            "Mensagem: Pagamento pendente R$ 150,00",
        ]

    def test_shipping_update_header_has_no_leading_space(self):
        channel, sink = _make_channel(WhatsAppChannel)
        channel.send_shipping_update("+55", "X1")
        assert sink.lines[0] == "WhatsApp para +55"


class TestAllChannels:
    """Properties shared by every built-in."""

    @pytest.mark.parametrize("cls", BUILTIN_CHANNELS)
    @pytest.mark.parametrize("locale", sorted(LOCALES))
    def test_every_kind_has_a_template(self, cls, locale):
        channel, _ = _make_channel(cls, locale)
        for kind in NotificationKind:
            fields = {"order_number": "1", "tracking_code": "T", "amount": "$ 1.00"}
            message = channel.render(kind, "r", **fields)
            assert message.header.endswith("r")

    @pytest.mark.parametrize("cls", BUILTIN_CHANNELS)
    def test_recipient_passed_through_verbatim(self, cls):
        channel, sink = _make_channel(cls)
        channel.send_order_confirmation("  not an address {}  ", "1")
        assert "  not an address {}  " in sink.lines[0]

    def test_keys_are_unique(self):
        keys = [cls.key for cls in BUILTIN_CHANNELS]
        assert sorted(keys) == ["email", "push", "sms", "whatsapp"]


# ═══════════════════════════════════════════════════════════════════════════
# Section 2: English bundle
# ═══════════════════════════════════════════════════════════════════════════

class TestEnglishBundle:

    def test_email_order_confirmation(self):
        channel, sink = _make_channel(EmailChannel, "en_US")
        channel.send_order_confirmation("a@b.com", "1001")
        assert sink.lines == [
            "Email to a@b.com",
            "Subject: Order Confirmation",
            "Message: Your order 1001 has been confirmed!",
        ]

    def test_push_amount_uses_dot_decimal(self):
        channel, sink = _make_channel(PushChannel, "en_US")
        channel.send_payment_reminder("device-xyz", 1234.5)
        assert sink.lines == [
            "Push to device-xyz",
            "Title: Payment Pending",
            "Message: Amount $ 1,234.50",
        ]


# ═══════════════════════════════════════════════════════════════════════════
# Section 3: Amount formatting
# ═══════════════════════════════════════════════════════════════════════════

class TestAmountFormatting:

    def test_thousands_pt_br(self):
        assert get_locale("pt_BR").format_number(Decimal("1234567.891")) == "1.234.567,89"

    def test_thousands_en_us(self):
        assert get_locale("en_US").format_number(Decimal("1234567.891")) == "1,234,567.89"

    def test_half_rounds_away_from_zero(self):
        assert get_locale("en_US").format_number(Decimal("2.345")) == "2.35"
        assert get_locale("en_US").format_number(Decimal("-2.345")) == "-2.35"

    def test_float_uses_shortest_repr(self):
        assert get_locale("en_US").format_number(1.005) == "1.01"

    def test_negative_amount_not_rejected(self):
        channel, sink = _make_channel(SmsChannel)
        channel.send_payment_reminder("+55", Decimal("-50"))
        assert sink.lines[-1] == "Mensagem: Pagamento pendente R$ -50,00"

    def test_zero(self):
        assert get_locale("pt_BR").format_currency(0) == "R$ 0,00"

    def test_amount_beyond_default_decimal_precision(self):
        assert get_locale("en_US").format_number(Decimal("10000000000000000000000000000")) == (
            "10,000,000,000,000,000,000,000,000,000.00"
        )

    def test_huge_amount_through_channel(self):
        channel, sink = _make_channel(EmailChannel)
        channel.send_payment_reminder("a@b.com", Decimal("79228162514264337593543950335"))
        assert sink.lines[-1] == (
            "Mensagem: Pagamento pendente R$ 79.228.162.514.264.337.593.543.950.335,00"
        )

    def test_huge_amount_rounds_half_up(self):
        assert get_locale("en_US").format_number(Decimal("99999999999999999999999999999.995")) == (
            "100,000,000,000,000,000,000,000,000,000.00"
        )

    def test_non_finite_printed_as_is(self):
        assert get_locale("en_US").format_number(Decimal("Infinity")) == "Infinity"


# ═══════════════════════════════════════════════════════════════════════════
# Section 4: Failure modes
# ═══════════════════════════════════════════════════════════════════════════

class TestMissingTemplates:

    def test_missing_kind_raises_before_writing(self):
        channel, sink = _make_channel(_PartialChannel)
        with pytest.raises(TemplateNotFoundError) as exc_info:
            channel.send_shipping_update("r", "T")
        assert sink.lines == []
        assert exc_info.value.details["kind"] == "shipping_update"

    def test_missing_locale_raises(self):
        channel, sink = _make_channel(_PartialChannel, "en_US")
        with pytest.raises(TemplateNotFoundError):
            channel.send_order_confirmation("r", "1")
        assert sink.lines == []

    def test_unknown_locale_raises(self):
        channel, sink = _make_channel(EmailChannel, "xx_XX")
        with pytest.raises(TemplateNotFoundError):
            channel.send_order_confirmation("r", "1")
        assert sink.lines == []

    def test_partial_channel_supported_kind_works(self):
        channel, sink = _make_channel(_PartialChannel)
        channel.send_order_confirmation("r", "9")
        assert sink.lines == ["Partial para r", "Mensagem: ok 9"]


class TestRender:

    def test_render_does_not_write(self):
        channel, sink = _make_channel(EmailChannel)
        message = channel.render(NotificationKind.ORDER_CONFIRMATION, "a@b.com", order_number="5")
        assert sink.lines == []
        assert message.to_text() == (
            "Email para a@b.com\n"
            "Assunto: Confirmação de Pedido\n"
            "Mensagem: Seu pedido 5 foi confirmado!"
        )

    def test_to_dict(self):
        channel, _ = _make_channel(SmsChannel)
        d = channel.render(NotificationKind.SHIPPING_UPDATE, "+1", tracking_code="T").to_dict()
        assert d["channel"] == "sms"
        assert d["kind"] == "shipping_update"
        assert len(d["lines"]) == 2

    def test_default_context_writes_to_stdout(self, capsys):
        SmsChannel(ChannelContext(locale="pt_BR")).send_shipping_update("+1", "T9")
        out = capsys.readouterr().out
        assert out == "SMS para +1\nMensagem: Rastreamento T9\n"


class TestMemorySink:

    def test_text_joins_written_lines(self):
        channel, sink = _make_channel(PushChannel)
        channel.send_shipping_update("tok", "BR1")
        assert sink.text() == (
            "Push para tok\nTítulo: Pedido Enviado\nMensagem: Rastreamento BR1"
        )

    def test_clear_between_sends(self):
        channel, sink = _make_channel(SmsChannel)
        channel.send_order_confirmation("+1", "1")
        sink.clear()
        assert sink.text() == ""
        channel.send_order_confirmation("+2", "2")
        assert sink.lines == ["SMS para +2", "Mensagem: Pedido 2 confirmado!"]
