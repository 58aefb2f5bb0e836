"""CSS classes emitted by the syntax generator.

Style sheets of every skin target exactly these names.
"""


class PreviewCss:
    """Class names for the syntax preview block."""

    CODE = "code"
    ATTRIBUTES = "attributes"
    ATTRIBUTE = "attribute"
    COMMENT = "comment"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    LITERAL = "literal"
    MEMBER = "member"
    PARAMETER = "parameter"
    PARAMETERS = "parameters"
    TYPE_PARAMETER = "typeparameter"
    TYPE_PARAMETERS = "typeparameters"
    CONSTRAINT = "constraint"
    CONSTRAINTS = "constraints"

    LANGUAGE_BASIC = "vb"
    LANGUAGE_CSHARP = "cs"


__all__ = ["PreviewCss"]
