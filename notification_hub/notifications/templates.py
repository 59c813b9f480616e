"""
templates.py — Per-locale wording and number formatting.

A ``LocaleBundle`` holds the parts of a notification block that are shared by
every channel: the header line, the subject / title / message labels, and the
currency convention. Channel-specific wording lives with each channel.

═══════════════════════════════════════════════════════════════════════════
BLOCK LAYOUT
═══════════════════════════════════════════════════════════════════════════

    {label} para {recipient}         ← header (always)
    Assunto: {title}                 ← email only
    Título: {title}                  ← push only
    Mensagem: {body}                 ← always

Amounts use two decimal places, rounded half away from zero:

    pt_BR    R$ 1.234,56
    en_US    $ 1,234.56
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Union

from notification_hub.core.errors import TemplateNotFoundError
from notification_hub.notifications.models import TitleStyle

Amount = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class LocaleBundle:
    """Shared wording and number format for one locale."""
    code: str
    header: str
    subject_label: str
    title_label: str
    message_label: str
    currency_symbol: str
    thousands_sep: str
    decimal_sep: str
    banner: str

    def heading(self, style: TitleStyle, title: str) -> str:
        label = self.subject_label if style is TitleStyle.SUBJECT else self.title_label
        return f"{label}: {title}"

    def message(self, body: str) -> str:
        return f"{self.message_label}: {body}"

    def format_number(self, amount: Amount) -> str:
        """Two decimals with this locale's separators; sign kept as-is."""
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        if value.is_finite():
            # Integer digits, cents and a rounding carry may exceed 28 digits
            with localcontext() as ctx:
                ctx.prec = max(ctx.prec, value.adjusted() + 4)
                value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
        text = f"{value:,.2f}"
        return text.translate(
            str.maketrans({",": self.thousands_sep, ".": self.decimal_sep})
        )

    def format_currency(self, amount: Amount) -> str:
        return f"{self.currency_symbol} {self.format_number(amount)}"


LOCALES: Dict[str, LocaleBundle] = {
    "pt_BR": LocaleBundle(
        code="pt_BR",
        header="{label} para {recipient}",
        subject_label="Assunto",
        title_label="Título",
        message_label="Mensagem",
        currency_symbol="R$",
        thousands_sep=".",
        decimal_sep=",",
        banner="=== Sistema de Notificações (Refatorado) ===",
    ),
    "en_US": LocaleBundle(
        code="en_US",
        header="{label} to {recipient}",
        subject_label="Subject",
        title_label="Title",
        message_label="Message",
        currency_symbol="$",
        thousands_sep=",",
        decimal_sep=".",
        banner="=== Notification System (Refactored) ===",
    ),
}


def get_locale(code: str) -> LocaleBundle:
    try:
        return LOCALES[code]
    except KeyError:
        raise TemplateNotFoundError(channel="*", locale=code, kind="*") from None
