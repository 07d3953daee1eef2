from lark import Lark

fitchlexer = Lark(r"""
    %import common.WS
    %ignore WS

    ?command : premise
             | assume
             | copy
             | discharge
             | undo
             | rule
             | show
             | latex
             | unused
             | help
             | quit

    premise : "premise" prop
    assume : "assume" prop
    copy : "copy" INDEX
    discharge : "discharge" | "close"
    undo : "undo"
    rule : "rule" RULE_NAME rule_arg*
    show : "show"
    latex : "latex"
    unused : "unused"
    help : "help" RULE_NAME?
    quit : "quit" | "exit"

    ?rule_arg : INDEX
              | prop

    ?prop : or_prop
          | or_prop _IMPLY prop         -> implication
    ?or_prop : and_prop
             | or_prop _OR and_prop     -> disjunction
    ?and_prop : neg_prop
              | and_prop _AND neg_prop  -> conjunction
    ?neg_prop : atom
              | _NEG neg_prop           -> negation
    ?atom : NAME                        -> symbol
          | "⊥"                         -> bottom
          | "(" prop ")"

    _IMPLY : "->" | "→" | "⇒"
    _OR : "|" | "∨" | "+"
    _AND : "&" | "∧" | "^" | "*"
    _NEG : "-" | "¬" | "~"

    INDEX : /[0-9]+/
    NAME : /[A-Za-z_][A-Za-z0-9_]*/
    RULE_NAME : /[^\s()0-9][^\s()]*/
""", start=["command", "prop"], parser="lalr")
