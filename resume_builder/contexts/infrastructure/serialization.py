"""
Resume YAML Serialization

Encodes a Resume as field-named YAML text and decodes it back. The text is the
snapshot format written by KeyValueResumeRepository and the `yaml` export.

Layout:
    schema_version: 1
    resume:
      personal_info: {...}
      education: [...]
      ...

OmegaConf treats every "${" in a string as the start of an interpolation and
rejects malformed ones, so user text is escaped on the way out: each "${"
becomes "\\${", with any backslashes directly in front of it doubled (the
OmegaConf escaping rules). Decoding never resolves interpolations and undoes
the escaping, so any text comes back verbatim.
"""

import re
from typing import Any, Callable, Dict

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from resume_builder.contexts.application.exceptions import SerializationError
from resume_builder.contexts.domain.models import Resume

SCHEMA_VERSION = 1
ROOT_KEY = "resume"

# A "${" together with the run of backslashes directly before it
INTERPOLATION_START = re.compile(r"(\\*)\$\{")


def escape_interpolations(text: str) -> str:
    """Escape every "${" so OmegaConf reads it as literal text."""
    return INTERPOLATION_START.sub(
        lambda match: "\\" * (2 * len(match.group(1)) + 1) + "${", text
    )


def unescape_interpolations(text: str) -> str:
    """
    Reverse escape_interpolations().

    Only odd backslash runs are escapes; an even run (including none) in front
    of "${" is a plain interpolation written by hand and is left alone.
    """

    def _unescape(match: re.Match) -> str:
        backslashes = match.group(1)
        if len(backslashes) % 2 == 0:
            return match.group(0)
        return "\\" * (len(backslashes) // 2) + "${"

    return INTERPOLATION_START.sub(_unescape, text)


def _map_strings(value: Any, convert: Callable[[str], str]) -> Any:
    if isinstance(value, str):
        return convert(value)
    if isinstance(value, dict):
        return {key: _map_strings(item, convert) for key, item in value.items()}
    if isinstance(value, list):
        return [_map_strings(item, convert) for item in value]
    return value


def resume_to_container(resume: Resume) -> Dict[str, Any]:
    """Wrap a resume's dict form with the schema header."""
    return {"schema_version": SCHEMA_VERSION, ROOT_KEY: resume.to_dict()}


def dump_resume(resume: Resume) -> str:
    """
    Encode a resume as YAML text.

    Raises:
        SerializationError: If the document holds values YAML cannot represent
    """
    try:
        conf = OmegaConf.create(_map_strings(resume_to_container(resume), escape_interpolations))
        return OmegaConf.to_yaml(conf)
    except (OmegaConfBaseException, YAMLError, TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"Failed to encode resume: {e}") from e


def load_resume_text(text: str) -> Resume:
    """
    Decode YAML text written by dump_resume().

    Documents without a schema header are read as a bare resume mapping.

    Raises:
        SerializationError: If the text is not valid YAML or not a valid resume
    """
    try:
        conf = OmegaConf.create(text)
        data = OmegaConf.to_container(conf, resolve=False)
    except (OmegaConfBaseException, YAMLError, TypeError, ValueError) as e:
        raise SerializationError(f"Stored resume is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError("Stored resume must be a YAML mapping")

    data = _map_strings(data, unescape_interpolations)

    version = data.get("schema_version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise SerializationError(f"Unsupported resume schema version: {version!r}")

    resume_data = data[ROOT_KEY] if ROOT_KEY in data else data

    try:
        return Resume.from_dict(resume_data)
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"Stored resume has invalid structure: {e}") from e
