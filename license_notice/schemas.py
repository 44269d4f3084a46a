from pydantic import BaseModel, ConfigDict, TypeAdapter


class _WireModel(BaseModel):
    # No coercion: a number where a string is expected is a decode failure.
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


class CargoLicenseIn(_WireModel):
    """Entry of ``cargo-license -j`` output (a JSON array of these)."""

    name: str
    version: str
    authors: str
    repository: str | None = None
    license: str | None = None
    license_file: str | None = None
    description: str | None = None


class CheckerLicenseIn(_WireModel):
    """Value of ``license-checker --json`` output, keyed by ``name@version``."""

    licenses: str | list[str] | None = None
    repository: str | None = None
    publisher: str | None = None
    email: str | None = None
    license_file: str | None = None


CargoLicenses = list[CargoLicenseIn]
CheckerLicenses = dict[str, CheckerLicenseIn]

CARGO_ADAPTER: TypeAdapter[CargoLicenses] = TypeAdapter(CargoLicenses)
CHECKER_ADAPTER: TypeAdapter[CheckerLicenses] = TypeAdapter(CheckerLicenses)
