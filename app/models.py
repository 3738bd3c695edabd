from pydantic import BaseModel, ConfigDict, Field

# --- Upstream contracts (PokeAPI species payload) ---

class Language(BaseModel):
    name: str = ""

class FlavorTextEntry(BaseModel):
    flavor_text: str = ""
    language: Language = Field(default_factory=Language)

class SpeciesPayload(BaseModel):
    # Only the flavor text entries are needed, everything else PokeAPI sends is ignored
    flavor_text_entries: list[FlavorTextEntry] = Field(default_factory=list)

# --- Upstream contracts (FunTranslations payload) ---

class TranslationContents(BaseModel):
    text: str = ""
    translated: str

class TranslationPayload(BaseModel):
    contents: TranslationContents

# Internal entity produced by the fetcher, one per request
class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str

# Model for the final API response
class PokemonResponse(BaseModel):
    name: str
    description: str

# Error value emitted alongside its HTTP status
class HttpError(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    status: int
