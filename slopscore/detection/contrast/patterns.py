"""Module with the named rule tables of the contrast pattern detector.

Stage 1 rules run on the normalised text. Stage 2 rules run on a stream in which
tagged words are replaced with the `VERB`, `NOUN`, `ADJ` and `ADV` placeholders.
Both tables are ordered; the order only affects diagnostics, never the score.
"""

import re

Rules = dict[str, re.Pattern[str]]


def _rule(pattern: str, *, ignore_case: bool = True) -> re.Pattern[str]:
    flags = re.DOTALL
    if ignore_case:
        flags |= re.IGNORECASE
    return re.compile(pattern, flags)


# Any character that does not end a sentence.
_IN_SENTENCE = r"(?:(?![.?!]).)"
_SUBJECT_BE = r"(?:it|this|that)(?:'s|\s+is|\s+was)"

STAGE1_RULES: Rules = {
    "RE_NOT_BUT": _rule(rf"\bnot\b{_IN_SENTENCE}{{1,160}}?\bbut\b"),
    "RE_NT_BUT": _rule(rf"\b\w+n't\b{_IN_SENTENCE}{{1,160}}?\bbut\b"),
    "RE_NOT_ONLY_BUT_ALSO": _rule(
        rf"\bnot\s+only\b{_IN_SENTENCE}{{1,160}}?\bbut\s+also\b"
    ),
    "RE_NOT_JUST_BUT": _rule(
        rf"\bnot\s+(?:just|merely|simply)\b{_IN_SENTENCE}{{1,160}}?\bbut\b"
    ),
    "RE_NOT_X_ITS_Y": _rule(
        rf"\b{_SUBJECT_BE}\s+not\s+[^.!?]{{1,80}}[.;]\s+{_SUBJECT_BE}\b"
    ),
    "RE_ISNT_JUST_ITS": _rule(
        r"\b(?:is|are|was|were)n't\s+(?:just|only|merely|simply)\b[^.!?]{0,80}?"
        r"[.;,-]\s*(?:it|they|this|that)(?:'s|'re|\s+is|\s+are|\s+was|\s+were)\b"
    ),
    "RE_NOT_ABOUT": _rule(
        rf"\bnot\s+about\b[^.!?]{{1,120}}?[.!?;,-]\s*{_SUBJECT_BE}\s+about\b"
    ),
    "RE_NOT_BECAUSE": _rule(
        rf"\bnot\s+because\b[^.!?]{{1,120}}?[.!?;,-]\s*{_SUBJECT_BE}\s+because\b"
    ),
    "RE_NOT_DASH_CORRECTION": _rule(
        r"\bnot\s+(?:just\s+|only\s+|merely\s+|simply\s+)?(?:a\s+|an\s+|the\s+)?"
        r"\w+\s*-+\s*(?:it|this|that|they)(?:'s|'re|\s+is|\s+are|\s+was|\s+were)\b"
    ),
    "RE_MORE_THAN_JUST": _rule(r"\bmore\s+than\s+(?:just|merely|simply)\b"),
    "RE_LESS_ABOUT_MORE_ABOUT": _rule(
        rf"\bless\s+about\b{_IN_SENTENCE}{{1,120}}?\bmore\s+about\b"
    ),
}

# Building blocks of the structural rules.
_Q = r"[\"']"
_NQ = r"[^\"']"
_SUBJ_IT_THEY = r"(?:it|they)"
_SUBJ_IT_THEY_CAP = r"(?:[Ii]t|[Tt]hey)"
_BE_PAST = r"(?:was|were)"
_BE_PRES = r"(?:is|are)"
_BE_ALL = r"(?:was|were|is|are)"
_BE_CONTR = r"(?:'s|'re)"
_NEG_CONTR = r"(?:wasn't|weren't|isn't|aren't)"
_NEG_CONTR_EXT = r"(?:wasn't|weren't|isn't|aren't|don't|doesn't)"
_EMPH = r"[*_~]?"
_ADJ_NEG = r"(?:random|passive|simple|normal)"
_ADJ_POS = r"(?:intentional|active|complex|different|\w{8,})"
_VERB_LEMMAS = (
    r"(?:REACT|SPEAK|LISTEN|LEARN|SIGNAL|WARN|DIE|LIVE|TEST|TEACH|AMPLIFY"
    r"|INTERPRET|TRANSLATE|DECODE|EMIT)"
)

STAGE2_RULES: Rules = {
    "POS_DOESNT_VERB": _rule(
        rf"{_Q}\s*(?:[Tt]he\s+\w+|[Ii]t|[Tt]hey|[Yy]ou)\s+doesn't\s+VERB[^.!?]*?"
        rf"[.!?]\s*(?:it|they|you|that)\s+{_EMPH}"
        r"(?:VERB|whispers?|reminds?|signals?|tests?|speaks?)"
    ),
    "POS_DONT_JUST_VERB": _rule(
        rf"{_Q}\s*(?:[Tt]hey|[Yy]ou|[Ii]t)\s+don't\s+just\s+VERB[^.!?]*?[—-]\s*"
        rf"they\s+{_EMPH}VERB"
    ),
    "POS_GERUND_FRAGMENT": _rule(
        rf"{_Q}\s*Not\s+just\s+VERB[.!?]\s+{_EMPH}VERB[.!?]", ignore_case=False
    ),
    "POS_NOT_ADJ": _rule(
        rf"\bnot\s+{_ADJ_NEG}[.!?;]\s+{_SUBJ_IT_THEY_CAP}\s+"
        rf"(?:{_BE_PAST}|{_BE_PRES}|{_BE_CONTR})\s+{_EMPH}{_ADJ_POS}"
    ),
    "POS_DASH_VERB": _rule(
        rf"\b{_NEG_CONTR}\s+just\s+(?:VERB|a\s+\w+)[^-]{{0,30}}?-\s*{_SUBJ_IT_THEY}\s+"
        rf"(?:{_BE_ALL}|{_BE_CONTR})\s+{_EMPH}(?:VERB|a\s+{_EMPH}\w+)"
    ),
    "POS_NOT_JUST_VERB_PAST": _rule(
        rf"\b{_BE_PAST}\s+not\s+just\s+(?:VERB|a\s+\w+)[.!?]\s+{_SUBJ_IT_THEY_CAP}\s+"
        rf"{_BE_PAST}\s+{_EMPH}(?:VERB|a\s+{_EMPH}\w+)"
    ),
    "POS_COLON_VERB": _rule(
        rf":\s+(?:the\s+\w+|it|they)\s+{_BE_PAST}\s+not\s+just\s+VERB[.!?]\s+"
        rf"{_SUBJ_IT_THEY_CAP}\s+{_BE_PAST}\s+{_EMPH}VERB"
    ),
    "POS_ISNT_JUST_VERB": _rule(
        rf"{_Q}\s*(?:{_NQ}{{0,100}}?\b)?(?:The\s+\w+|It|They|You)\s+"
        rf"(?:isn't|aren't|wasn't|weren't)\s+just\s+VERB{_NQ}{{0,40}}?[—-]\s*"
        rf"(?:it's|they're)\s+{_EMPH}VERB"
    ),
    "POS_QUOTE_MULTI_VERB": _rule(
        rf"{_Q}\s*{_NQ}{{0,150}}?\b(?:not\s+just|isn't|aren't)\s+(?:VERB|a\s+\w+)"
        rf"{_NQ}{{0,60}}?[.!?]\s+(?:{_NQ}{{0,40}}?\b)?(?:It's|They're|You're|That's)\s+"
        rf"{_EMPH}(?:VERB|a\s+{_EMPH}\w+)"
    ),
    "POS_ELLIPSIS_VERB": _rule(
        rf"{_Q}\s*{_NQ}{{0,100}}?\b(?:not\s+just|isn't)\s+VERB{_NQ}{{0,30}}?[.…]\s*"
        rf"[.…]\s*(?:they're|it's|you're)\s+{_EMPH}VERB"
    ),
    "POS_NOT_NOUN": _rule(
        rf"{_Q}\s*(?:That's|It's)\s+not\s+(?:a\s+)?"
        r"(?:sign|message|warning|pattern|test|phenomenon|one\s+\w+)[.!?]\s+"
        rf"(?:That's|It's)\s+(?:a\s+|\*?all\s+)?{_EMPH}"
        r"(?:warning|question|language|symbol|test|presence|story|challenge|\w+)"
    ),
    "POS_DOESNT_VERB_EMPHASIS": _rule(
        rf"{_Q}\s*(?:The\s+\w+|It|They)\s+doesn't\s+(?:VERB|react|warn|speak)[.!?]\s+"
        r"It\s+\*(?:VERB|whispers?|reminds?|signals?)"
    ),
    "POS_DASH_VERB_BROAD": _rule(
        rf"\b{_NEG_CONTR_EXT}\s+just\s+(?:VERB|(?:the|a)\s+\w+)[^-]{{0,40}}?-\s*"
        rf"{_SUBJ_IT_THEY}\s+(?:{_BE_ALL}|{_BE_CONTR})?\s*{_EMPH}"
        rf"(?:VERB|(?:the|a)\s+{_EMPH}\w+)"
    ),
    "POS_ELLIPSIS_BROAD": _rule(
        rf"{_Q}\s*(?:{_NQ}{{0,100}}?\b)?(?:They're|You're|This)\s+(?:not\s+just|isn't)\s+"
        rf"(?:VERB|a\s+\w+){_NQ}{{0,40}}?[.…]\s*[.…]\s*(?:they're|it's|you're|this)\s+"
        r"(?:VERB|a\s+\w+)"
    ),
    "POS_NOT_BECAUSE": _rule(
        r"\bit's\s+not\s+because\s+[^.!?]{5,60}?[.!?]\s+(?:It's|That's)\s+because\s+"
        r"[^.!?]{5,60}"
    ),
    "POS_GERUND_BROAD": _rule(
        rf"{_Q}\s*Not\s+just\s+VERB[.!?]\s+\*VERB[.!?]?", ignore_case=False
    ),
    "POS_QUOTE_VERBING": _rule(
        rf"{_Q}\s*(?:You're|They're|It's)\s+not\s+(?:just\s+)?VERB{_NQ}{{0,30}}?[.,]\s+"
        rf"{_NQ}{{0,50}}?(?:You're|They're|It's)\s+(?:VERB|waiting)"
    ),
    "POS_DOESNT_LITERAL": _rule(
        rf"{_Q}\s*(?:The\s+\w+|It|They)\s+doesn't\s+(?:VERB|react|warn|speak|listen)\s*"
        r"[.!?]\s+It\s+\*\w+\*"
    ),
    "POS_DASH_NOUN_SWAP": _rule(
        rf"\b{_BE_ALL}\s+not\s+just\s+a\s+\w+[^-]{{0,10}}?-\s*{_SUBJ_IT_THEY}\s+"
        rf"{_BE_ALL}\s+(?:a\s+)?\*\w+\*"
    ),
    "POS_ISNT_DASH_EMPHASIS": _rule(
        rf"{_Q}\s*(?:The\s+\w+|It|They)\s+(?:isn't|aren't|wasn't|weren't)\s+just\s+"
        r"(?:VERB|a\s+\w+)[^-]{0,40}?-\s*(?:it's|they're)\s+\*\w+\*"
    ),
    "POS_THATS_NOT_NOUN": _rule(
        rf"{_Q}\s*That's\s+not\s+(?:a\s+)?"
        r"(?:sign|message|pattern|phenomenon|test|one\s+\w+|\w+)[.!?]\s+"
        r"(?:That's|It's)\s+(?:a\s+)?\*\w+\*"
    ),
    "POS_GERUND_EMPHASIS": _rule(
        rf"{_Q}\s*Not\s+just\s+(?:VERB|reacting|dying|\w+ing)[.!?]\s+\*[A-Z]\w+\*",
        ignore_case=False,
    ),
    "POS_QUOTE_ATTRIBUTION_VERB": _rule(
        rf"{_Q}\s*(?:The\s+\w+|They)\s+(?:are|were|'re)\s+not\s+just\s+VERB,\"\s+"
        rf"{_NQ}{{0,30}}?\.\s+\"They're\s+\*?VERB"
    ),
    "POS_ISNT_NOUN": _rule(
        rf"{_Q}\s*(?:This|That|It)\s+isn't\s+just\s+a\s+\w+[.!?]\s+It's\s+(?:a\s+)?"
        r"\*\w+\*"
    ),
    "POS_ITS_NOT_JUST": _rule(
        rf"{_Q}\s*It's\s+not\s+just\s+(?:one\s+)?(\w+)[.!?]\s+It's\s+"
        r"\*(?:all|every|each|\w+)\*"
    ),
    "POS_DASH_GERUND_OBJ": _rule(
        rf"{_Q}\s*(?:They're|You're|It's)\s+not\s+just\s+(?:VERB|emitting|dying|\w+ing)\s+"
        r"(?:a|an|the)\s+\w+[^-]{0,10}?-\s*(?:they're|you're|it's)\s+\*\w+\*"
    ),
    "POS_ELLIPSIS_DIALOGUE": _rule(
        rf"{_Q}\s*(?:They're|You're|It's)\s+not\s+just\s+VERB,\"\s+{_NQ}{{5,40}}?\.\s+"
        r"\"(?:They're|You're|It's)[…\s]+(?:VERB|\w+ing)"
    ),
    "POS_SEMI_NOUN": _rule(
        rf"\b{_BE_ALL}\s+not\s+just\s+(?:folklore|\w+);\s+{_SUBJ_IT_THEY}\s+{_BE_ALL}\s+"
        r"a\s+\w+"
    ),
    "POS_ISNT_ADJ_NOUN": _rule(
        rf"{_Q}\s*(?:{_NQ}{{0,30}}?\b)?(?:this|that|it)\s+isn't\s+just\s+a\s+"
        r"(?:natural\s+)?\w+[.!?]\s+It's\s+(?:a\s+)?\*\w+\*"
    ),
    "POS_DIALOGUE_ATTR": _rule(
        rf"{_Q}\s*(?:You're|They're|It's|The\s+\w+)\s+(?:(?:are|is|'re|'s)\s+)?"
        rf"not\s+just\s+(?:VERB(?:\s+\w+)?|a\s+\w+),\"\s+{_NQ}{{3,50}}?\.\s+"
        r"\"(?:You're|They're|It's)\s+(?:a\s+)?\*\w+\*"
    ),
    "POS_TO_VERB_ISNT": _rule(
        rf"{_Q}\s*To\s+VERB\s+(?:that\s+)?{_NQ}{{5,50}}?isn't\s+just\s+a\s+\w+[.!?]\s+"
        r"It's\s+(?:a\s+)?\*\w+\*"
    ),
    "POS_I_AM_NOT_SEMI": _rule(r"\bI\s+am\s+not\s+VERB[^;]{5,80}?;\s*it\s+is\b"),
    "POS_NOT_ANYMORE_ITS": _rule(
        r"\bIt's\s+not\s+[A-Z]\w+\s+anymore[.!?]\s+It's\s+[A-Z]\w+", ignore_case=False
    ),
    "POS_AINT_SIMPLE": _rule(
        r"\b(?:That|This)\s+ain't\s+[^.!?]{3,40}?[.!?]\s+(?:They|It)\s+\w+"
    ),
    "LEMMA_SAME_VERB": _rule(
        rf"\b({_VERB_LEMMAS})\b[^.!?]{{5,80}}?[.!?;—-]\s*[^.!?]{{0,40}}?\b\1\b"
    ),
}
