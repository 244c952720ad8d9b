"""
Formal grammar for trailhead expressions.

Grammar
=======

<expression>      ::= "/" <path-part> [ "/?" <query-part> ]
<path-token>      ::= ":" <name> [ "{" <type> "}" ]
<query-part>      ::= <query-token> ( "&" <query-token> )*
<query-token>     ::= <required> | <required-array> | <optional>
                    | <optional-array> | <literal>
<required>        ::= ":" <name> [ "{" <type> "}" ]
<required-array>  ::= ":" <name> "{[" <type> "]}"
<optional>        ::= ":" <name> "{" <type> "?}"
<optional-array>  ::= ":" <name> "{[" <type> "]?}"
<literal>         ::= ":" <name> "{'" <word> "'}"
<name>            ::= <word>
<type>            ::= [a-z]+
<word>            ::= [A-Za-z0-9_]+

Path tokens are always required. Optional, literal and array forms are only
recognized in the query part; anywhere else they are plain text. Text in the
path that is not a token is kept as-is, so it may carry regular expression
syntax such as ``.*``.

Built-in Types
==============
- int: base-10 integer
- string: the value itself (inferred when no type is given)
- bool: True/true/yes/1 and False/false/no/0

Expression Examples
===================
/newsfeed
/newsfeed/:postId{int}/comment/:commentId
/newsfeed/.*
/search/?:query&:page{int?}
/feed/?:postIds{[int]}&:tags{[string]?}
/newsfeed/:post{int}/?:action{'like_post'}&:ref{string?}
"""

# Characters a captured path component may contain
PATH_COMPONENT_CHARS = r"A-Za-z0-9_.\-~"

# Capture group substituted for every path token
PATH_CAPTURE_GROUP = f"([{PATH_COMPONENT_CHARS}]+)"

# Required token bounded by "/" on the left and "/" or end on the right
PATH_REQUIRED_TOKEN = r"(?<=/)(:\w+(\{[a-z]+\})|:\w+)(?=(/|$))"

QUERY_REQUIRED_TOKEN = r":\w+(\{[a-z]+\})|(:\w+(?=&|$))|:\w+(\{\[[a-z]+\]\})"
QUERY_OPTIONAL_TOKEN = r":\w+\{[a-z]+\?\}|:\w+\{\[[a-z]+\]\?\}"
QUERY_LITERAL_TOKEN = r":\w+\{'\w+'\}"

_ANY_QUERY_TOKEN = f"({QUERY_REQUIRED_TOKEN}|{QUERY_LITERAL_TOKEN}|{QUERY_OPTIONAL_TOKEN})"

# Right-anchored "?tok(&tok)*" run that separates the query part from the path
QUERY_PART = rf"\?({_ANY_QUERY_TOKEN}(&{_ANY_QUERY_TOKEN})*)$"

# Full-token captures used to pull name/type/value out of a matched token
REQUIRED_TYPED = r"^:(\w+)\{([a-z]+)\}$"
REQUIRED_ARRAY = r"^:(\w+)\{\[([a-z]+)\]\}$"
REQUIRED_INFERRED = r"^:(\w+)$"
OPTIONAL_TYPED = r"^:(\w+)\{([a-z]+)\?\}$"
OPTIONAL_ARRAY = r"^:(\w+)\{\[([a-z]+)\]\?\}$"
LITERAL_VALUE = r"^:(\w+)\{'(\w+)'\}$"

# Valid global query parameter name
PARAM_NAME = r"\w+"

# Valid registry type name
TYPE_NAME = r"[A-Za-z]+"
