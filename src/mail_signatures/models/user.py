"""Per-user signature input."""

from dataclasses import dataclass, field, fields
from typing import Any

from mail_signatures.models.validation import is_email, is_url


@dataclass
class UserSignatureData:
    """One person's signature fields.

    Construction never fails so that partially filled records can still be
    previewed; call validate() before producing final output.

    Attributes:
        name: Full name
        position: Job title
        mail: Contact address
        phone: Phone number as displayed
        phone_country_code: International dialing prefix (e.g., "+34")
        internal_phone: Internal extension
        opt_mail: Secondary contact address
        organization_extra: Extra italic line below the contact line
        main_font: Body font family override
        name_font: Name font family override
        max_width: Maximum signature width in pixels
        name_image: Avatar/logo image URL override
        output: Explicit output filename
    """

    name: str = ""
    position: str = ""
    mail: str = ""
    phone: str | None = None
    phone_country_code: str | None = None
    internal_phone: str | None = None
    opt_mail: str | None = None
    organization_extra: str | None = None
    main_font: str | None = None
    name_font: str | None = None
    max_width: int | None = None
    name_image: str | None = None
    output: str | None = None

    # Input values that could not be converted, by field
    conversion_errors: dict[str, str] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserSignatureData":
        """Create from a mapping, ignoring unknown keys and None values.

        Text fields are converted to strings (YAML reads unquoted phone
        numbers as ints) and max_width to an integer. Values that cannot be
        converted are dropped and reported by validate().
        """
        known = {f.name for f in fields(cls) if f.init}
        values: dict[str, Any] = {}
        conversion_errors: dict[str, str] = {}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            if key == "max_width":
                try:
                    value = int(value)
                except (TypeError, ValueError):
                    conversion_errors[key] = f"max_width must be an integer (got {value!r})"
                    continue
            else:
                value = str(value)
            values[key] = value

        user = cls(**values)
        user.conversion_errors = conversion_errors
        return user

    def merged_with(self, overrides: dict[str, Any]) -> "UserSignatureData":
        """Return a copy with non-None overrides applied."""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.init}
        data.update({k: v for k, v in overrides.items() if v is not None})
        merged = UserSignatureData.from_dict(data)
        # Keep file conversion problems unless an override replaced the value
        for key, message in self.conversion_errors.items():
            if overrides.get(key) is None:
                merged.conversion_errors.setdefault(key, message)
        return merged

    def validate(self) -> list[str]:
        """Check the record the way the input form does.

        Returns:
            List of problems (empty if the record is valid)
        """
        errors: list[str] = list(self.conversion_errors.values())

        if not self.name.strip():
            errors.append("name is required")
        if not self.position.strip():
            errors.append("position is required")
        if not is_email(self.mail):
            errors.append(f"invalid email: {self.mail!r}")
        if self.opt_mail and not is_email(self.opt_mail):
            errors.append(f"invalid optional email: {self.opt_mail!r}")
        if self.name_image and not is_url(self.name_image):
            errors.append(f"invalid name_image URL: {self.name_image!r}")
        if self.max_width is not None and self.max_width <= 0:
            errors.append(f"max_width must be positive (got {self.max_width})")

        return errors
