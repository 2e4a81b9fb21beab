r"""Implement the table of languages supported by PasteMyst.

The table is an immutable value built from a compiled-in list. It is
looked up locally: no request is sent to the service. Lookups are
case-insensitive exact matches and return ``None`` when nothing
matches.

Example:
    ```pycon
    >>> from pastemyst.language import LanguageTable
    >>> table = LanguageTable.default()
    >>> table.find_by_name("python").name
    'Python'
    >>> table.find_by_extension(".rs").name
    'Rust'
    >>> table.find_by_name("not-a-language") is None
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "APL",
    "ASN1",
    "ASP_NET",
    "ASTERISK",
    "AUTODETECT",
    "BRAINFUCK",
    "C",
    "CLANG",
    "CLOJURE",
    "CLOJURE_SCRIPT",
    "CMAKE",
    "COBOL",
    "COFFEE_SCRIPT",
    "CPP",
    "CQL",
    "CRYSTAL",
    "CSHARP",
    "CSS",
    "CYPHER",
    "CYTHON",
    "D",
    "DART",
    "DIFF",
    "DJANGO",
    "DLANG",
    "DOCKER",
    "DTD",
    "DYLAN",
    "EBNF",
    "ECL",
    "EDN",
    "EIFFEL",
    "EJS",
    "ELM",
    "ERB",
    "ERLANG",
    "ESPER",
    "FACTOR",
    "FCL",
    "FORTH",
    "FORTRAN",
    "FSHARP",
    "GAS",
    "GFM",
    "GHERKIN",
    "GITHUB_MARKDOWN",
    "GO",
    "GROOVY",
    "GSS",
    "HAML",
    "HASKELL",
    "HASKELL_LITERATE",
    "HAXE",
    "HTML",
    "HTTP",
    "HXML",
    "IDL",
    "INI",
    "JAVA",
    "JAVASCRIPT",
    "JINJA2",
    "JSON",
    "JSON_LD",
    "JSP",
    "JSX",
    "JULIA",
    "KOTLIN",
    "LATEX",
    "LESS",
    "LISP",
    "LIVESCRIPT",
    "LUA",
    "MARIA_DB",
    "MARKDOWN",
    "MATHEMATICA",
    "MBOX",
    "MIRC",
    "MODELICA",
    "MSCGEN",
    "MSGENNY",
    "MS_SQL",
    "MUMPS",
    "MYSQL",
    "NGINX",
    "NSIS",
    "NTRIPLES",
    "OBJ_C",
    "OCAML",
    "OCTAVE",
    "OZ",
    "PASCAL",
    "PEG_JS",
    "PERL",
    "PGP",
    "PHP",
    "PIG",
    "PLAIN",
    "PLSQL",
    "POWERSHELL",
    "PROTOBUF",
    "PUG",
    "PUPPET",
    "PYTHON",
    "QLANG",
    "RPM_CHANGES",
    "RPM_SPEC",
    "RSCRIPT",
    "RST",
    "RUBY",
    "RUST",
    "SAS",
    "SASS",
    "SCALA",
    "SCHEME",
    "SCSS",
    "SHELL",
    "SIEVE",
    "SLIM",
    "SMALLTALK",
    "SMARTY",
    "SML",
    "SOLR",
    "SOY",
    "SPARQL",
    "SPREADSHEET",
    "SQL",
    "SQLITE",
    "SQUIRREL",
    "STEX",
    "STYLUS",
    "SWIFT",
    "SYSTEM_VERILOG",
    "TCL",
    "TEXTILE",
    "TIDDLYWIKI",
    "TIKI_WIKI",
    "TOML",
    "TORNADO",
    "TROFF",
    "TTCN",
    "TTCN_CFG",
    "TURTLE",
    "TWIG",
    "TYPESCRIPT",
    "TYPESCRIPT_JSX",
    "VBSCRIPT",
    "VB_NET",
    "VELOCITY",
    "VERILOG",
    "VHDL",
    "VUE",
    "WEB_IDL",
    "XML",
    "XQUERY",
    "XU",
    "YACAS",
    "YAML",
    "Z80",
    "LanguageInfo",
    "LanguageTable",
    "get_language_by_extension",
    "get_language_by_name",
    "get_languages",
]

import functools
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

AUTODETECT = "Autodetect"
PLAIN = "Plain Text"
APL = "APL"
PGP = "PGP"
ASN1 = "ASN.1"
ASTERISK = "Asterisk"
BRAINFUCK = "Brainfuck"
C = "C"
CLANG = C
CPP = "C++"
COBOL = "Cobol"
CSHARP = "C#"
CLOJURE = "Clojure"
CLOJURE_SCRIPT = "ClojureScript"
GSS = "Closure Stylesheets (GSS)"
CMAKE = "CMake"
COFFEE_SCRIPT = "CoffeeScript"
LISP = "Common Lisp"
CYPHER = "Cypher"
CYTHON = "Cython"
CRYSTAL = "Crystal"
CSS = "CSS"
CQL = "CQL"
D = "D"
DLANG = D
DART = "Dart"
DIFF = "diff"
DJANGO = "Django"
DOCKER = "Dockerfile"
DTD = "DTD"
DYLAN = "Dylan"
EBNF = "EBNF"
ECL = "ECL"
EDN = "edn"
EIFFEL = "Eiffel"
ELM = "Elm"
EJS = "Embedded Javascript"
ERB = "Embedded Ruby"
ERLANG = "Erlang"
ESPER = "Esper"
FACTOR = "Factor"
FCL = "FCL"
FORTH = "Forth"
FORTRAN = "Fortran"
FSHARP = "F#"
GAS = "Gas"
GHERKIN = "Gherkin"
GFM = "GitHub Flavored Markdown"
GITHUB_MARKDOWN = GFM
GO = "Go"
GROOVY = "Groovy"
HAML = "HAML"
HASKELL = "Haskell"
HASKELL_LITERATE = "Haskell (Literate)"
HAXE = "Haxe"
HXML = "HXML"
ASP_NET = "ASP.NET"
HTML = "HTML"
HTTP = "HTTP"
IDL = "IDL"
PUG = "Pug"
JAVA = "Java"
JSP = "Java Server Pages"
JAVASCRIPT = "JavaScript"
JSON = "JSON"
JSON_LD = "JSON-LD"
JSX = "JSX"
JINJA2 = "Jinja2"
JULIA = "Julia"
KOTLIN = "Kotlin"
LESS = "LESS"
LIVESCRIPT = "LiveScript"
LUA = "Lua"
MARKDOWN = "Markdown"
MIRC = "mIRC"
MARIA_DB = "MariaDB SQL"
MATHEMATICA = "Mathematica"
MODELICA = "Modelica"
MUMPS = "MUMPS"
MS_SQL = "MS SQL"
MBOX = "mbox"
MYSQL = "MySQL"
NGINX = "Nginx"
NSIS = "NSIS"
NTRIPLES = "NTriples"
OBJ_C = "Objective-C"
OCAML = "OCaml"
OCTAVE = "Octave"
OZ = "Oz"
PASCAL = "Pascal"
PEG_JS = "PEG.js"
PERL = "Perl"
PHP = "PHP"
PIG = "Pig"
PLSQL = "PLSQL"
POWERSHELL = "PowerShell"
INI = "Properties files"
PROTOBUF = "ProtoBuf"
PYTHON = "Python"
PUPPET = "Puppet"
QLANG = "Q"
RSCRIPT = "R"
RST = "reStructuredText"
RPM_CHANGES = "RPM Changes"
RPM_SPEC = "RPM Spec"
RUBY = "Ruby"
RUST = "Rust"
SAS = "SAS"
SASS = "Sass"
SCALA = "Scala"
SCHEME = "Scheme"
SCSS = "SCSS"
SHELL = "Shell"
SIEVE = "Sieve"
SLIM = "Slim"
SMALLTALK = "Smalltalk"
SMARTY = "Smarty"
SOLR = "Solr"
SML = "SML"
SOY = "Soy"
SPARQL = "SPARQL"
SPREADSHEET = "Spreadsheet"
SQL = "SQL"
SQLITE = "SQLite"
SQUIRREL = "Squirrel"
STYLUS = "Stylus"
SWIFT = "SWIFT"
STEX = "sTeX"
LATEX = "LaTeX"
SYSTEM_VERILOG = "SystemVerilog"
TCL = "Tcl"
TEXTILE = "Textile"
TIDDLYWIKI = "TiddlyWiki"
TIKI_WIKI = "Tiki Wiki"
TOML = "TOML"
TORNADO = "Tornado"
TROFF = "troff"
TTCN = "TTCN"
TTCN_CFG = "TTCN_CFG"
TURTLE = "Turtle"
TYPESCRIPT = "TypeScript"
TYPESCRIPT_JSX = "TypeScript-JSX"
TWIG = "Twig"
WEB_IDL = "Web IDL"
VB_NET = "VB.NET"
VBSCRIPT = "VBScript"
VELOCITY = "Velocity"
VERILOG = "Verilog"
VHDL = "VHDL"
VUE = "Vue.js Component"
XML = "XML"
XQUERY = "XQuery"
YACAS = "Yacas"
YAML = "YAML"
Z80 = "Z80"
MSCGEN = "mscgen"
XU = "xu"
MSGENNY = "msgenny"


@dataclass(frozen=True)
class LanguageInfo:
    """Metadata of a language supported by PasteMyst.

    Attributes:
        name: The display name, also used as the pasty language.
        mode: The editor mode used for syntax highlighting.
        aliases: Alternative names accepted by ``find_by_name``.
        extensions: File extensions without the leading dot.
        mimes: MIME types associated with the language.
        color: The display color as a hex string, if the language has one.
    """

    name: str
    mode: str
    aliases: frozenset[str] = frozenset()
    extensions: frozenset[str] = frozenset()
    mimes: tuple[str, ...] = ()
    color: str | None = None


def _lang(
    name: str,
    mode: str,
    extensions: tuple[str, ...] = (),
    aliases: tuple[str, ...] = (),
    mimes: tuple[str, ...] = (),
    color: str | None = None,
) -> LanguageInfo:
    return LanguageInfo(
        name=name,
        mode=mode,
        aliases=frozenset(aliases),
        extensions=frozenset(extensions),
        mimes=mimes,
        color=color,
    )


# Extensions shared by several languages are only listed on the most common one
_LANGUAGES: tuple[LanguageInfo, ...] = (
    _lang(AUTODETECT, "autodetect"),
    _lang(
        PLAIN,
        "text",
        ("txt", "text", "conf", "def", "list", "log"),
        ("plain", "text", "plaintext"),
        ("text/plain",),
    ),
    _lang(APL, "apl", ("dyalog", "apl"), (), ("text/apl",), "#5A8164"),
    _lang(
        PGP,
        "asciiarmor",
        ("asc", "pgp", "sig"),
        (),
        (
            "application/pgp",
            "application/pgp-encrypted",
            "application/pgp-keys",
            "application/pgp-signature",
        ),
    ),
    _lang(ASN1, "asn.1", ("asn", "asn1"), (), ("text/x-ttcn-asn",)),
    _lang(ASTERISK, "asterisk", (), (), ("text/x-asterisk",)),
    _lang(BRAINFUCK, "brainfuck", ("b", "bf"), ("bf",), ("text/x-brainfuck",), "#2F2530"),
    _lang(C, "clike", ("c", "h", "ino"), ("clang",), ("text/x-csrc",), "#555555"),
    _lang(
        CPP,
        "clike",
        ("cpp", "c++", "cc", "cxx", "hpp", "h++", "hh", "hxx"),
        ("cpp", "cplusplus"),
        ("text/x-c++src",),
        "#f34b7d",
    ),
    _lang(COBOL, "cobol", ("cob", "cpy", "cbl"), (), ("text/x-cobol",)),
    _lang(CSHARP, "clike", ("cs",), ("csharp", "cs"), ("text/x-csharp",), "#178600"),
    _lang(CLOJURE, "clojure", ("clj", "cljc", "cljx"), ("clj",), ("text/x-clojure",), "#db5855"),
    _lang(CLOJURE_SCRIPT, "clojure", ("cljs",), ("cljs",), ("text/x-clojurescript",), "#db5855"),
    _lang(GSS, "css", ("gss",), ("gss",), ("text/x-gss",)),
    _lang(CMAKE, "cmake", ("cmake", "cmake.in"), (), ("text/x-cmake",), "#DA3434"),
    _lang(
        COFFEE_SCRIPT,
        "coffeescript",
        ("coffee",),
        ("coffee", "coffee-script"),
        ("application/vnd.coffeescript", "text/coffeescript", "text/x-coffeescript"),
        "#244776",
    ),
    _lang(LISP, "commonlisp", ("cl", "lisp", "el"), ("lisp",), ("text/x-common-lisp",), "#3fb68b"),
    _lang(CYPHER, "cypher", ("cyp", "cypher"), (), ("application/x-cypher-query",)),
    _lang(CYTHON, "python", ("pyx", "pxd", "pxi"), (), ("text/x-cython",), "#fedf5b"),
    _lang(CRYSTAL, "crystal", ("cr",), (), ("text/x-crystal",), "#000100"),
    _lang(CSS, "css", ("css",), (), ("text/css",), "#563d7c"),
    _lang(CQL, "sql", ("cql",), (), ("text/x-cassandra",)),
    _lang(D, "d", ("d",), ("dlang",), ("text/x-d",), "#ba595e"),
    _lang(DART, "dart", ("dart",), (), ("application/dart", "text/x-dart"), "#00B4AB"),
    _lang(DIFF, "diff", ("diff", "patch"), ("patch",), ("text/x-diff",)),
    _lang(DJANGO, "django", (), (), ("text/x-django",)),
    _lang(DOCKER, "dockerfile", ("dockerfile",), ("docker",), ("text/x-dockerfile",), "#384d54"),
    _lang(DTD, "dtd", ("dtd",), (), ("application/xml-dtd",)),
    _lang(DYLAN, "dylan", ("dylan", "dyl", "intr"), (), ("text/x-dylan",), "#6c616e"),
    _lang(EBNF, "ebnf", (), (), ("text/x-ebnf",)),
    _lang(ECL, "ecl", ("ecl",), (), ("text/x-ecl",), "#8a1267"),
    _lang(EDN, "clojure", ("edn",), (), ("application/edn",)),
    _lang(EIFFEL, "eiffel", ("e",), (), ("text/x-eiffel",), "#4d6977"),
    _lang(ELM, "elm", ("elm",), (), ("text/x-elm",), "#60B5CC"),
    _lang(EJS, "htmlembedded", ("ejs",), ("ejs",), ("application/x-ejs",)),
    _lang(ERB, "htmlembedded", ("erb",), ("erb",), ("application/x-erb",)),
    _lang(ERLANG, "erlang", ("erl",), (), ("text/x-erlang",), "#B83998"),
    _lang(ESPER, "sql", (), (), ("text/x-esper",)),
    _lang(FACTOR, "factor", ("factor",), (), ("text/x-factor",), "#636746"),
    _lang(FCL, "fcl", (), (), ("text/x-fcl",)),
    _lang(FORTH, "forth", ("forth", "fth", "4th"), (), ("text/x-forth",), "#341708"),
    _lang(
        FORTRAN, "fortran", ("f", "for", "f77", "f90", "f95"), (), ("text/x-fortran",), "#4d41b1"
    ),
    _lang(FSHARP, "mllike", ("fs", "fsi", "fsx"), ("fsharp",), ("text/x-fsharp",), "#b845fc"),
    _lang(GAS, "gas", ("s",), (), ("text/x-gas",)),
    _lang(GHERKIN, "gherkin", ("feature",), ("cucumber",), ("text/x-feature",), "#5B2063"),
    _lang(GFM, "gfm", (), ("gfm", "github markdown"), ("text/x-gfm",)),
    _lang(GO, "go", ("go",), ("golang",), ("text/x-go",), "#00ADD8"),
    _lang(GROOVY, "groovy", ("groovy", "gradle"), (), ("text/x-groovy",), "#4298b8"),
    _lang(HAML, "haml", ("haml",), (), ("text/x-haml",), "#ece2a9"),
    _lang(HASKELL, "haskell", ("hs",), (), ("text/x-haskell",), "#5e5086"),
    _lang(HASKELL_LITERATE, "haskell-literate", ("lhs",), (), ("text/x-literate-haskell",)),
    _lang(HAXE, "haxe", ("hx",), (), ("text/x-haxe",), "#df7900"),
    _lang(HXML, "haxe", ("hxml",), (), ("text/x-hxml",)),
    _lang(ASP_NET, "htmlembedded", ("aspx",), ("asp", "aspx"), ("application/x-aspx",)),
    _lang(
        HTML,
        "htmlmixed",
        ("html", "htm", "xhtml", "handlebars", "hbs"),
        ("xhtml",),
        ("text/html",),
        "#e34c26",
    ),
    _lang(HTTP, "http", (), (), ("message/http",)),
    _lang(IDL, "idl", ("pro",), (), ("text/x-idl",), "#a3522f"),
    _lang(PUG, "pug", ("jade", "pug"), ("jade",), ("text/x-pug", "text/x-jade"), "#a86454"),
    _lang(JAVA, "clike", ("java",), (), ("text/x-java",), "#b07219"),
    _lang(JSP, "htmlembedded", ("jsp",), ("jsp",), ("application/x-jsp",)),
    _lang(
        JAVASCRIPT,
        "javascript",
        ("js", "mjs", "cjs"),
        ("ecmascript", "js", "node"),
        ("text/javascript", "application/javascript", "application/ecmascript"),
        "#f1e05a",
    ),
    _lang(
        JSON,
        "javascript",
        ("json", "map"),
        ("json5",),
        ("application/json", "application/x-json"),
    ),
    _lang(JSON_LD, "javascript", ("jsonld",), ("jsonld",), ("application/ld+json",)),
    _lang(JSX, "jsx", ("jsx",), (), ("text/jsx",)),
    _lang(JINJA2, "jinja2", ("j2", "jinja", "jinja2"), (), ("text/jinja2",)),
    _lang(JULIA, "julia", ("jl",), ("jl",), ("text/x-julia",), "#a270ba"),
    _lang(KOTLIN, "clike", ("kt", "kts"), (), ("text/x-kotlin",), "#A97BFF"),
    _lang(LESS, "css", ("less",), (), ("text/x-less",), "#1d365d"),
    _lang(LIVESCRIPT, "livescript", ("ls",), ("ls",), ("text/x-livescript",), "#499886"),
    _lang(LUA, "lua", ("lua",), (), ("text/x-lua",), "#000080"),
    _lang(
        MARKDOWN, "markdown", ("md", "markdown", "mkd"), ("md",), ("text/x-markdown",), "#083fa1"
    ),
    _lang(MIRC, "mirc", (), (), ("text/mirc",)),
    _lang(MARIA_DB, "sql", (), ("mariadb",), ("text/x-mariadb",)),
    _lang(MATHEMATICA, "mathematica", ("nb", "wl", "wls"), (), ("text/x-mathematica",), "#dd1100"),
    _lang(MODELICA, "modelica", ("mo",), (), ("text/x-modelica",), "#de1d31"),
    _lang(MUMPS, "mumps", ("mps",), (), ("text/x-mumps",), "#244963"),
    _lang(MS_SQL, "sql", (), ("mssql",), ("text/x-mssql",)),
    _lang(MBOX, "mbox", ("mbox",), (), ("application/mbox",)),
    _lang(MYSQL, "sql", (), (), ("text/x-mysql",)),
    _lang(NGINX, "nginx", (), (), ("text/x-nginx-conf",), "#009639"),
    _lang(NSIS, "nsis", ("nsh", "nsi"), (), ("text/x-nsis",)),
    _lang(
        NTRIPLES,
        "ntriples",
        ("nt", "nq"),
        (),
        ("application/n-triples", "application/n-quads", "text/n-triples"),
    ),
    _lang(OBJ_C, "clike", ("m", "mm"), ("objectivec", "objc"), ("text/x-objectivec",), "#438eff"),
    _lang(OCAML, "mllike", ("ml", "mli", "mll", "mly"), (), ("text/x-ocaml",), "#3be133"),
    _lang(OCTAVE, "octave", (), (), ("text/x-octave",)),
    _lang(OZ, "oz", ("oz",), (), ("text/x-oz",), "#fab738"),
    _lang(PASCAL, "pascal", ("p", "pas"), ("delphi",), ("text/x-pascal",), "#E3F171"),
    _lang(PEG_JS, "pegjs", ("pegjs",), (), ()),
    _lang(PERL, "perl", ("pl", "pm"), (), ("text/x-perl",), "#0298c3"),
    _lang(
        PHP,
        "php",
        ("php", "php3", "php4", "php5", "php7", "phtml"),
        (),
        ("application/x-httpd-php", "text/x-php"),
        "#4F5D95",
    ),
    _lang(PIG, "pig", ("pig",), (), ("text/x-pig",)),
    _lang(PLSQL, "sql", ("pls",), (), ("text/x-plsql",)),
    _lang(
        POWERSHELL,
        "powershell",
        ("ps1", "psd1", "psm1"),
        ("pwsh", "posh"),
        ("application/x-powershell",),
        "#012456",
    ),
    _lang(INI, "properties", ("properties", "ini"), ("ini", "properties"), ("text/x-properties",)),
    _lang(PROTOBUF, "protobuf", ("proto",), ("protobuf",), ("text/x-protobuf",)),
    _lang(
        PYTHON,
        "python",
        ("py", "pyw", "pyi", "bzl"),
        ("py", "python3"),
        ("text/x-python",),
        "#3572A5",
    ),
    _lang(PUPPET, "puppet", ("pp",), (), ("text/x-puppet",), "#302B6D"),
    _lang(QLANG, "q", ("q",), (), ("text/x-q",), "#0040cd"),
    _lang(RSCRIPT, "r", ("r", "rdata", "rds"), ("rscript", "splus"), ("text/x-rsrc",), "#198CE7"),
    _lang(RST, "rst", ("rst",), ("rst",), ("text/x-rst",), "#141414"),
    _lang(RPM_CHANGES, "rpm", (), (), ("text/x-rpm-changes",)),
    _lang(RPM_SPEC, "rpm", ("spec",), (), ("text/x-rpm-spec",)),
    _lang(
        RUBY,
        "ruby",
        ("rb",),
        ("jruby", "macruby", "rake", "rb", "rbx"),
        ("text/x-ruby",),
        "#701516",
    ),
    _lang(RUST, "rust", ("rs",), ("rs",), ("text/x-rustsrc",), "#dea584"),
    _lang(SAS, "sas", ("sas",), (), ("text/x-sas",), "#B34936"),
    _lang(SASS, "sass", ("sass",), (), ("text/x-sass",), "#a53b70"),
    _lang(SCALA, "clike", ("scala", "sc"), (), ("text/x-scala",), "#c22d40"),
    _lang(SCHEME, "scheme", ("scm", "ss"), (), ("text/x-scheme",), "#1e4aec"),
    _lang(SCSS, "css", ("scss",), (), ("text/x-scss",), "#c6538c"),
    _lang(
        SHELL,
        "shell",
        ("sh", "ksh", "bash"),
        ("bash", "sh", "zsh"),
        ("text/x-sh", "application/x-sh"),
        "#89e051",
    ),
    _lang(SIEVE, "sieve", ("siv", "sieve"), (), ("application/sieve",)),
    _lang(SLIM, "slim", ("slim",), (), ("text/x-slim", "application/x-slim"), "#2b2b2b"),
    _lang(SMALLTALK, "smalltalk", ("st",), (), ("text/x-stsrc",), "#596706"),
    _lang(SMARTY, "smarty", ("tpl",), (), ("text/x-smarty",), "#f0c040"),
    _lang(SOLR, "solr", (), (), ("text/x-solr",)),
    _lang(SML, "mllike", ("sml", "fun", "smackspec"), ("standard ml",), ("text/x-sml",), "#dc566d"),
    _lang(SOY, "soy", ("soy",), ("closure template",), ("text/x-soy",)),
    _lang(SPARQL, "sparql", ("rq", "sparql"), ("sparul",), ("application/sparql-query",)),
    _lang(SPREADSHEET, "spreadsheet", (), ("excel", "formula"), ("text/x-spreadsheet",)),
    _lang(SQL, "sql", ("sql",), (), ("text/x-sql",), "#e38c00"),
    _lang(SQLITE, "sql", ("sqlite",), (), ("text/x-sqlite",)),
    _lang(SQUIRREL, "clike", ("nut",), (), ("text/x-squirrel",), "#800000"),
    _lang(STYLUS, "stylus", ("styl",), (), ("text/x-styl",), "#ff6347"),
    _lang(SWIFT, "swift", ("swift",), ("swift",), ("text/x-swift",), "#F05138"),
    _lang(STEX, "stex", (), (), ("text/x-stex",)),
    _lang(LATEX, "stex", ("tex", "ltx", "sty", "cls"), ("tex",), ("text/x-latex",), "#3D6117"),
    _lang(
        SYSTEM_VERILOG, "verilog", ("sv", "svh"), (), ("text/x-systemverilog",), "#DAE1C2"
    ),
    _lang(TCL, "tcl", ("tcl",), (), ("text/x-tcl",), "#e4cc98"),
    _lang(TEXTILE, "textile", ("textile",), (), ("text/x-textile",), "#ffe7ac"),
    _lang(TIDDLYWIKI, "tiddlywiki", (), (), ("text/x-tiddlywiki",)),
    _lang(TIKI_WIKI, "tiki", (), (), ("text/tiki",)),
    _lang(TOML, "toml", ("toml",), (), ("text/x-toml",), "#9c4221"),
    _lang(TORNADO, "tornado", (), (), ("text/x-tornado",)),
    _lang(
        TROFF, "troff", ("1", "2", "3", "4", "5", "6", "7", "8", "9"), (), ("text/troff",)
    ),
    _lang(TTCN, "ttcn", ("ttcn", "ttcn3", "ttcnpp"), (), ("text/x-ttcn",)),
    _lang(TTCN_CFG, "ttcn-cfg", ("cfg",), (), ("text/x-ttcn-cfg",)),
    _lang(TURTLE, "turtle", ("ttl",), (), ("text/turtle",), "#3d3dd1"),
    _lang(
        TYPESCRIPT,
        "javascript",
        ("ts", "mts", "cts"),
        ("ts",),
        ("application/typescript",),
        "#3178c6",
    ),
    _lang(TYPESCRIPT_JSX, "jsx", ("tsx",), ("tsx",), ("text/typescript-jsx",), "#3178c6"),
    _lang(TWIG, "twig", (), (), ("text/x-twig",), "#c1d026"),
    _lang(WEB_IDL, "webidl", ("webidl",), (), ("text/x-webidl",)),
    _lang(VB_NET, "vb", ("vb",), ("vb", "vbnet"), ("text/x-vb",), "#945db7"),
    _lang(VBSCRIPT, "vbscript", ("vbs",), (), ("text/vbscript",), "#15dcdc"),
    _lang(VELOCITY, "velocity", ("vtl",), (), ("text/velocity",)),
    _lang(VERILOG, "verilog", ("v",), (), ("text/x-verilog",), "#b2b7f8"),
    _lang(VHDL, "vhdl", ("vhd", "vhdl"), (), ("text/x-vhdl",), "#adb2cb"),
    _lang(VUE, "vue", ("vue",), ("vue",), ("script/x-vue", "text/x-vue"), "#41b883"),
    _lang(
        XML,
        "xml",
        ("xml", "xsd", "xsl", "svg"),
        ("rss", "xsd", "wsdl"),
        ("application/xml", "text/xml"),
        "#0060ac",
    ),
    _lang(XQUERY, "xquery", ("xy", "xquery"), (), ("application/xquery",), "#5232e7"),
    _lang(YACAS, "yacas", ("ys",), (), ("text/x-yacas",)),
    _lang(YAML, "yaml", ("yaml", "yml"), ("yml",), ("text/x-yaml", "text/yaml"), "#cb171e"),
    _lang(Z80, "z80", ("z80",), (), ("text/x-z80",)),
    _lang(MSCGEN, "mscgen", ("mscgen", "mscin", "msc"), (), ("text/x-mscgen",)),
    _lang(XU, "mscgen", ("xu",), (), ("text/x-xu",)),
    _lang(MSGENNY, "mscgen", ("msgenny",), (), ("text/x-msgenny",)),
)


class LanguageTable:
    r"""Implement an immutable, case-insensitive language lookup table.

    Args:
        languages: The languages to index. When two languages claim the
            same name, alias, or extension, the first one wins.

    Example:
        ```pycon
        >>> from pastemyst.language import LanguageInfo, LanguageTable
        >>> table = LanguageTable([LanguageInfo(name="Zig", mode="zig", extensions=frozenset({"zig"}))])
        >>> len(table)
        1
        >>> table.find_by_extension("ZIG").name
        'Zig'

        ```
    """

    def __init__(self, languages: Iterable[LanguageInfo]) -> None:
        self._languages = tuple(languages)
        names: dict[str, LanguageInfo] = {}
        extensions: dict[str, LanguageInfo] = {}
        for info in self._languages:
            for key in (info.name, *sorted(info.aliases)):
                names.setdefault(key.casefold(), info)
            for ext in sorted(info.extensions):
                extensions.setdefault(ext.casefold(), info)
        self._names: Mapping[str, LanguageInfo] = MappingProxyType(names)
        self._extensions: Mapping[str, LanguageInfo] = MappingProxyType(extensions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_by_name(name) is not None

    def __iter__(self) -> Iterator[LanguageInfo]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(num_languages={len(self._languages):,})"

    @classmethod
    def default(cls) -> LanguageTable:
        r"""Return the table of the languages supported by PasteMyst.

        The table is built on the first call and shared afterwards.

        Returns:
            The default language table.
        """
        return _default_table()

    def find_by_name(self, name: str) -> LanguageInfo | None:
        r"""Find a language by its name or one of its aliases.

        Args:
            name: The name to look up. The match is case-insensitive.

        Returns:
            The language, or ``None`` if no language has this name.

        Example:
            ```pycon
            >>> from pastemyst.language import LanguageTable
            >>> LanguageTable.default().find_by_name("RuSt").color
            '#dea584'

            ```
        """
        return self._names.get(name.strip().casefold())

    def find_by_extension(self, extension: str) -> LanguageInfo | None:
        r"""Find a language by one of its file extensions.

        Args:
            extension: The extension to look up, with or without the
                leading dot. The match is case-insensitive.

        Returns:
            The language, or ``None`` if no language uses this
                extension.
        """
        return self._extensions.get(extension.strip().removeprefix(".").casefold())

    def names(self) -> tuple[str, ...]:
        r"""Return the display names of all the languages, in table
        order."""
        return tuple(info.name for info in self._languages)


@functools.lru_cache(maxsize=1)
def _default_table() -> LanguageTable:
    return LanguageTable(_LANGUAGES)


def get_languages() -> tuple[LanguageInfo, ...]:
    r"""Return all the languages of the default table."""
    return tuple(LanguageTable.default())


def get_language_by_name(name: str) -> LanguageInfo | None:
    r"""Find a language by name in the default table.

    Args:
        name: The name or alias of the language.

    Returns:
        The language, or ``None`` if it is unknown.
    """
    return LanguageTable.default().find_by_name(name)


def get_language_by_extension(extension: str) -> LanguageInfo | None:
    r"""Find a language by file extension in the default table.

    Args:
        extension: The file extension, with or without the leading dot.

    Returns:
        The language, or ``None`` if it is unknown.
    """
    return LanguageTable.default().find_by_extension(extension)
