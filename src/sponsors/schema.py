from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class PrincipalSponsor(BaseModel):
    """One sponsor pair, as stored in the sponsor sheet."""

    model_config = ConfigDict(frozen=True)

    MalePrincipalSponsor: str = ""
    FemalePrincipalSponsor: str = ""


class SponsorDelete(BaseModel):
    MalePrincipalSponsor: StrictStr

    @field_validator("MalePrincipalSponsor")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("MalePrincipalSponsor is required")
        return v


class SponsorCreate(SponsorDelete):
    FemalePrincipalSponsor: StrictStr | None = None

    def trimmed(self) -> PrincipalSponsor:
        return PrincipalSponsor(
            MalePrincipalSponsor=self.MalePrincipalSponsor.strip(),
            FemalePrincipalSponsor=(self.FemalePrincipalSponsor or "").strip(),
        )


class SponsorUpdate(SponsorCreate):
    originalName: StrictStr | None = None

    @property
    def lookup_name(self) -> str:
        # The sheet row is keyed by the male name it was created with.
        return self.originalName or self.MalePrincipalSponsor


class ErrorResponse(BaseModel):
    error: str
