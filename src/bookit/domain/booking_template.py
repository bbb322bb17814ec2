"""Booking template domain service.

Turns booking templates into bookings:

1. the reference named by the parameters is resolved,
2. the template amount is resolved against that reference (and against a
   person's charge rate when ``person_id`` is given),
3. template fields, the amount and caller overrides are composed,
4. the booking is built, and optionally persisted.
"""

import logging
import re
from typing import Any, Mapping, Optional, Union

from bookit.database.base import Database
from bookit.domain.account import AccountService
from bookit.domain.amount import PersonRateProvider, is_blank, parse_amount_rule, resolve_amount
from bookit.domain.booking import BookingService
from bookit.domain.charge_rate import ChargeRateService
from bookit.domain.entities import (
    Booking as BookingEntity,
    BookingTemplate as BookingTemplateEntity,
    LineItem,
    MatchResult,
)
from bookit.domain.errors import (
    ConflictError,
    InvalidMatcherError,
    NotFoundError,
    TemplateNotFoundError,
    ValidationError,
    duplicate_code,
    invalid_matcher,
    template_id_not_found,
    template_not_found,
)
from bookit.domain.line_item import build_line_item
from bookit.domain.matcher import match_templates
from bookit.domain.parameters import (
    compose_booking_parameters,
    normalize_parameters,
    split_control_parameters,
)
from bookit.domain.reference import ReferenceResolver

logger = logging.getLogger(__name__)

TemplateOrCode = Union[BookingTemplateEntity, str]


class BookingTemplateService:
    """Service for managing booking templates and booking from them."""

    def __init__(self, db: Database, rate_provider: Optional[PersonRateProvider] = None):
        """Initialize booking template service.

        Args:
            db: Database instance
            rate_provider: Optional person-rate provider used for every
                template; by default each template's charge rates are used
        """
        self.db = db
        self.rate_provider = rate_provider
        self.account_service = AccountService(db)
        self.booking_service = BookingService(db)
        self.charge_rate_service = ChargeRateService(db)
        self.reference_resolver = ReferenceResolver(db)

    # Template management
    def create_template(
        self,
        code: str,
        title: str,
        amount: Optional[str] = None,
        amount_relates_to: Optional[str] = None,
        comments: Optional[str] = None,
        debit_account_id: Optional[int] = None,
        credit_account_id: Optional[int] = None,
        matcher: Optional[str] = None,
        position: Optional[int] = None,
        include_in_saldo_list: bool = False,
        charge_rate_code: Optional[str] = None,
    ) -> int:
        """Create a booking template.

        Args:
            code: Unique template code, optionally type-prefixed ("VAT:standard")
            title: Title copied to bookings and line items
            amount: Amount encoding ("12.50", "15%" or None)
            amount_relates_to: Relation of the amount to a reference
            comments: Optional comments copied to bookings
            debit_account_id: Debit account ID
            credit_account_id: Credit account ID
            matcher: Optional regular expression for import matching
            position: Optional line item position
            include_in_saldo_list: Whether line items appear in saldo lists
            charge_rate_code: Optional charge rate code for person amounts

        Returns:
            Template ID

        Raises:
            ValidationError: If code or title is empty, an account does not
                exist or the matcher is not a valid regular expression
            ConflictError: If a template with the same code exists
        """
        if is_blank(code):
            raise ValidationError("Template code must not be empty")
        if is_blank(title):
            raise ValidationError("Template title must not be empty")
        if self.db.get_booking_template_by_code(code) is not None:
            raise ConflictError(duplicate_code("BookingTemplate", code))

        self.account_service.require_account(debit_account_id)
        self.account_service.require_account(credit_account_id)
        self._check_matcher(code, matcher)

        return self.db.create_booking_template(
            code=code,
            title=title,
            amount=amount,
            amount_relates_to=amount_relates_to,
            comments=comments,
            debit_account_id=debit_account_id,
            credit_account_id=credit_account_id,
            matcher=matcher,
            position=position,
            include_in_saldo_list=include_in_saldo_list,
            charge_rate_code=charge_rate_code,
        )

    def _check_matcher(self, code: str, matcher: Optional[str]) -> None:
        if matcher is None:
            return
        try:
            re.compile(matcher)
        except re.error as e:
            raise InvalidMatcherError(invalid_matcher(code, str(e)))

    def get_template(self, template_id: int) -> Optional[BookingTemplateEntity]:
        """Get booking template by ID."""
        return self.db.get_booking_template(template_id)

    def get_template_by_code(self, code: str) -> Optional[BookingTemplateEntity]:
        """Get booking template by code, or None."""
        return self.db.get_booking_template_by_code(code)

    def require_template_by_code(self, code: str) -> BookingTemplateEntity:
        """Get booking template by code.

        Raises:
            TemplateNotFoundError: If no template has this code
        """
        template = self.db.get_booking_template_by_code(code)
        if template is None:
            raise TemplateNotFoundError(template_not_found(code))
        return template

    def list_templates(self, template_type: Optional[str] = None) -> list[BookingTemplateEntity]:
        """List templates ordered by code.

        Args:
            template_type: Optional type prefix; "VAT" lists codes starting
                with "VAT:"
        """
        prefix = None if template_type is None else f"{template_type}:"
        return self.db.list_booking_templates(code_prefix=prefix)

    def update_template(self, template_id: int, **fields: Any) -> None:
        """Update booking template fields.

        Raises:
            NotFoundError: If the template does not exist
            ValidationError: If an account does not exist or the matcher is invalid
            ConflictError: If the new code is taken by another template
        """
        template = self.db.get_booking_template(template_id)
        if template is None:
            raise NotFoundError(template_id_not_found(template_id))

        if "code" in fields:
            existing = self.db.get_booking_template_by_code(fields["code"])
            if existing is not None and existing.id != template_id:
                raise ConflictError(duplicate_code("BookingTemplate", fields["code"]))
        for key in ("debit_account_id", "credit_account_id"):
            if key in fields:
                self.account_service.require_account(fields[key])
        if "matcher" in fields:
            self._check_matcher(fields.get("code", template.code), fields["matcher"])

        self.db.update_booking_template(template_id, **fields)

    def delete_template(self, template_id: int) -> None:
        """Delete a booking template.

        Raises:
            NotFoundError: If the template does not exist
        """
        if self.db.get_booking_template(template_id) is None:
            raise NotFoundError(template_id_not_found(template_id))
        self.db.delete_booking_template(template_id)

    def add_tag(self, template_id: int, name: str) -> None:
        """Tag a booking template."""
        if is_blank(name):
            raise ValidationError("Tag name must not be empty")
        self.db.add_booking_template_tag(template_id, name.strip())

    def list_tags(self, template_id: int) -> tuple[str, ...]:
        """List a booking template's tags ordered by name.

        Raises:
            NotFoundError: If the template does not exist
        """
        template = self.db.get_booking_template(template_id)
        if template is None:
            raise NotFoundError(template_id_not_found(template_id))
        return template.tags

    # Bookings
    def _locate(self, template_or_code: TemplateOrCode) -> Optional[BookingTemplateEntity]:
        if isinstance(template_or_code, BookingTemplateEntity):
            return template_or_code
        return self.db.get_booking_template_by_code(template_or_code)

    def _rate_provider_for(self, template: BookingTemplateEntity) -> Optional[PersonRateProvider]:
        if self.rate_provider is not None:
            return self.rate_provider
        return self.charge_rate_service.provider_for(template.charge_rate_code)

    def booking_parameters(
        self,
        template: BookingTemplateEntity,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> dict[str, Any]:
        """Compose the booking parameters for a template.

        Args:
            template: Booking template
            params: Caller parameters; ``reference``, ``reference_type``,
                ``reference_id`` and ``person_id`` steer amount resolution,
                every other key overrides the composed value

        Returns:
            Normalised parameter dict with title, comments, account IDs,
            amount and any overrides

        Raises:
            NotFoundError: If a (reference_type, reference_id) lookup fails
        """
        control, _ = split_control_parameters(normalize_parameters(params))
        reference = self.reference_resolver.resolve(control)

        person_id = control.get("person_id")
        if is_blank(person_id):
            person_id = None
        else:
            try:
                person_id = int(person_id)
            except (TypeError, ValueError):
                raise ValidationError(f"Invalid person ID '{person_id}'")

        rule = parse_amount_rule(template.amount, template.amount_relates_to)
        amount = resolve_amount(
            rule,
            reference=reference,
            person_id=person_id,
            rate_provider=self._rate_provider_for(template),
        )
        logger.debug("Booking amount for template %s: %s", template.code, amount)
        return compose_booking_parameters(template, amount, params)

    def build_booking(
        self,
        template_or_code: TemplateOrCode,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> BookingEntity:
        """Build an unsaved booking from a template or template code.

        Raises:
            TemplateNotFoundError: If a code is given and no template matches
        """
        template = self._locate(template_or_code)
        if template is None:
            raise TemplateNotFoundError(template_not_found(template_or_code))
        return self.booking_service.booking_from_parameters(
            self.booking_parameters(template, params)
        )

    def create_booking(
        self,
        template_or_code: TemplateOrCode,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> Optional[BookingEntity]:
        """Build and persist a booking from a template or template code.

        Returns:
            The stored booking, or None when a code is given and no template
            matches
        """
        template = self._locate(template_or_code)
        if template is None:
            logger.info("No booking template for '%s'; nothing booked", template_or_code)
            return None
        booking = self.booking_service.booking_from_parameters(
            self.booking_parameters(template, params)
        )
        return self.booking_service.save_booking(booking)

    # Line items and import matching
    def build_line_item(self, template_or_code: TemplateOrCode) -> LineItem:
        """Expand a template or template code into a line item.

        Raises:
            TemplateNotFoundError: If a code is given and no template matches
        """
        template = self._locate(template_or_code)
        if template is None:
            raise TemplateNotFoundError(template_not_found(template_or_code))
        return build_line_item(template)

    def match(self, text: str) -> MatchResult:
        """Match a free-text description against all templates."""
        return match_templates(text, self.db.list_booking_templates())
