"""Grammar shape models shared by language plugins and the indent checker."""

from pydantic import BaseModel, Field


class GrammarProfile(BaseModel):
    """
    Fixed child-slot positions of controlled statements per construct kind.

    The defaults follow the ANTLR Solidity grammar shape:
    ``if ( expr ) statement else statement`` and ``while ( expr ) statement``.
    A ``for`` statement always controls its last child.
    """

    if_then: int = Field(4, ge=0, description="Slot of the statement after if (...)")
    if_else: int = Field(6, ge=0, description="Slot of the statement after else")
    while_body: int = Field(4, ge=0, description="Slot of the while body")
    do_while_body: int = Field(1, ge=0, description="Slot of the do-while body")


DEFAULT_PROFILE = GrammarProfile()
