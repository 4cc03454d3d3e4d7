"""KaTeX command tables.

Grouped by the number of brace arguments the completion inserts: the
``_0`` tables take none, ``_1`` one, ``_2`` two. Some commands appear in
more than one category; the catalog deduplicates them.
"""

from __future__ import annotations

# Arity 0

DELIMITERS_0 = [
    "lparen", "rparen", "lceil", "rceil", "uparrow", "lbrack", "rbrack",
    "lfloor", "rfloor", "downarrow", "lbrace", "rbrace", "lmoustache",
    "rmoustache", "updownarrow", "langle", "rangle", "lgroup", "rgroup",
    "Uparrow", "vert", "ulcorner", "urcorner", "Downarrow", "Vert",
    "llcorner", "lrcorner", "Updownarrow", "lvert", "rvert", "lVert",
    "rVert", "backslash", "lang", "rang", "lt", "gt", "llbracket",
    "rrbracket", "lBrace", "rBrace",
]

DELIMITER_SIZING_0 = [
    "left", "big", "bigl", "bigm", "bigr", "middle", "Big", "Bigl", "Bigm",
    "Bigr", "right", "bigg", "biggl", "biggm", "biggr", "Bigg", "Biggl",
    "Biggm", "Biggr",
]

GREEK_LETTERS_0 = [
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
    "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi", "Rho",
    "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega", "varGamma",
    "varDelta", "varTheta", "varLambda", "varXi", "varPi", "varSigma",
    "varUpsilon", "varPhi", "varPsi", "varOmega", "alpha", "beta", "gamma",
    "delta", "epsilon", "zeta", "eta", "theta", "iota", "kappa", "lambda",
    "mu", "nu", "xi", "omicron", "pi", "rho", "sigma", "tau", "upsilon",
    "phi", "chi", "psi", "omega", "varepsilon", "varkappa", "vartheta",
    "thetasym", "varpi", "varrho", "varsigma", "varphi", "digamma",
]

OTHER_LETTERS_0 = [
    "imath", "nabla", "Im", "Reals", "jmath", "partial", "image", "wp",
    "aleph", "Game", "Bbbk", "weierp", "alef", "Finv", "N", "Z", "alefsym",
    "cnums", "natnums", "beth", "Complex", "R", "gimel", "ell", "Re",
    "daleth", "hbar", "real", "eth", "hslash", "reals",
]

SPACING_0 = [
    "quad", "qquad", "enspace", "thinspace", "medspace", "thickspace",
    "negthinspace", "negmedspace", "negthickspace", "nobreakspace", "space",
]

VERTICAL_LAYOUT_0 = ["atop"]

LOGIC_AND_SET_THEORY_0 = [
    "forall", "complement", "therefore", "emptyset", "exists", "subset",
    "because", "empty", "exist", "supset", "mapsto", "varnothing", "nexists",
    "mid", "to", "implies", "in", "land", "gets", "impliedby", "isin", "lor",
    "leftrightarrow", "iff", "notin", "ni", "notni", "neg", "lnot",
]

MACROS_0 = ["def", "gdef", "edef", "xdef", "let", "futurelet", "global",
           "newcommand", "renewcommand", "providecommand", "long", "char",
           "mathchoice", "TextOrMath"]

BIG_OPERATORS_0 = [
    "sum", "prod", "bigotimes", "bigvee", "int", "coprod", "bigoplus",
    "bigwedge", "iint", "intop", "bigodot", "bigcap", "iiint", "smallint",
    "biguplus", "bigcup", "oint", "oiint", "oiiint", "bigsqcup",
]

BINARY_OPERATORS_0 = [
    "cdot", "gtrdot", "cdotp", "intercal", "centerdot", "land", "rhd", "circ",
    "leftthreetimes", "rightthreetimes", "amalg", "circledast", "ldotp",
    "rtimes", "And", "circledcirc", "lor", "setminus", "ast", "circleddash",
    "lessdot", "smallsetminus", "barwedge", "Cup", "lhd", "sqcap",
    "bigcirc", "cup", "ltimes", "sqcup", "bmod", "curlyvee", "times",
    "boxdot", "curlywedge", "mp", "unlhd", "boxminus", "div", "odot",
    "unrhd", "boxplus", "divideontimes", "ominus", "uplus", "boxtimes",
    "dotplus", "oplus", "vee", "bullet", "doublebarwedge", "otimes",
    "veebar", "Cap", "doublecap", "oslash", "wedge", "cap", "doublecup",
    "pm", "plusmn", "wr",
]

BINOMIAL_COEFFICIENTS_0 = ["choose"]

FRACTIONS_0 = ["over"]

MATH_OPERATORS_0 = [
    "arcsin", "cosec", "deg", "sec", "arccos", "cosh", "dim", "sin",
    "arctan", "cot", "exp", "sinh", "arctg", "cotg", "hom", "sh", "arcctg",
    "coth", "ker", "tan", "arg", "csc", "lg", "tanh", "ch", "ctg", "ln",
    "tg", "cos", "cth", "log", "th", "argmax", "injlim", "min", "varinjlim",
    "argmin", "lim", "plim", "varliminf", "det", "liminf", "Pr",
    "varlimsup", "gcd", "limsup", "projlim", "varprojlim", "inf", "max",
    "sup",
]

RELATIONS_0 = [
    "doteqdot", "lessapprox", "smile", "eqcirc", "lesseqgtr", "sqsubset",
    "eqcolon", "minuscolon", "lesseqqgtr", "sqsubseteq", "Eqcolon",
    "minuscoloncolon", "lessgtr", "sqsupset", "approx", "eqqcolon",
    "equalscolon", "lesssim", "sqsupseteq", "approxcolon", "Eqqcolon",
    "equalscoloncolon", "ll", "Subset", "approxcoloncolon", "eqsim", "lll",
    "subset", "approxeq", "eqslantgtr", "llless", "subseteq", "asymp",
    "eqslantless", "lt", "subseteqq", "backepsilon", "equiv", "mid",
    "succ", "backsim", "fallingdotseq", "models", "succapprox",
    "backsimeq", "frown", "multimap", "succcurlyeq", "between", "ge",
    "owns", "succeq", "bowtie", "geq", "parallel", "succsim", "bumpeq",
    "geqq", "perp", "Supset", "Bumpeq", "geqslant", "pitchfork", "supset",
    "circeq", "gg", "prec", "supseteq", "colonapprox", "ggg",
    "precapprox", "supseteqq", "Colonapprox", "gggtr", "preccurlyeq",
    "thickapprox", "coloncolonapprox", "gt", "preceq", "thicksim",
    "coloneq", "gtrapprox", "precsim", "trianglelefteq", "Coloneq",
    "gtreqless", "propto", "triangleq", "coloncoloneq", "gtreqqless",
    "risingdotseq", "trianglerighteq", "coloneqq", "gtrless", "shortmid",
    "varpropto", "Coloneqq", "gtrsim", "shortparallel", "vartriangle",
    "coloncoloneqq", "in", "sim", "vartriangleleft", "colonsim", "Join",
    "simcolon", "vartriangleright", "Colonsim", "le", "simcoloncolon",
    "vcentcolon", "coloncolonsim", "leq", "simeq", "vdash", "cong",
    "leqq", "smallfrown", "vDash", "curlyeqprec", "leqslant",
    "smallsmile", "Vdash", "curlyeqsucc", "lessdot", "Vvdash", "dashv",
    "dblcolon", "doteq", "Doteq",
]

NEGATED_RELATIONS_0 = [
    "gnapprox", "ngeqslant", "nsubseteq", "precneqq", "gneq", "ngtr",
    "nsubseteqq", "precnsim", "gneqq", "nleq", "nsucc", "subsetneq",
    "gnsim", "nleqq", "nsucceq", "subsetneqq", "gvertneqq", "nleqslant",
    "nsupseteq", "succnapprox", "lnapprox", "nless", "nsupseteqq",
    "succneqq", "lneq", "nmid", "ntriangleleft", "succnsim", "lneqq",
    "notin", "ntrianglelefteq", "supsetneq", "lnsim", "notni",
    "ntriangleright", "supsetneqq", "lvertneqq", "nparallel",
    "ntrianglerighteq", "varsubsetneq", "ncong", "nprec", "nvdash",
    "varsubsetneqq", "ne", "npreceq", "nvDash", "varsupsetneq", "neq",
    "nshortmid", "nVDash", "varsupsetneqq", "ngeq", "nshortparallel",
    "nVdash", "ngeqq", "nsim", "precnapprox",
]

ARROWS_0 = [
    "circlearrowleft", "leftharpoonup", "rArr", "circlearrowright",
    "leftleftarrows", "rarr", "curvearrowleft", "leftrightarrow", "restriction",
    "curvearrowright", "Leftrightarrow", "rightarrow", "Darr",
    "leftrightarrows", "Rightarrow", "dArr", "leftrightharpoons",
    "rightarrowtail", "darr", "leftrightsquigarrow", "rightharpoondown",
    "dashleftarrow", "Lleftarrow", "rightharpoonup", "dashrightarrow",
    "longleftarrow", "rightleftarrows", "downarrow", "Longleftarrow",
    "rightleftharpoons", "Downarrow", "longleftrightarrow",
    "rightrightarrows", "downdownarrows", "Longleftrightarrow",
    "rightsquigarrow", "downharpoonleft", "longmapsto", "Rrightarrow",
    "downharpoonright", "longrightarrow", "Rsh", "gets", "Longrightarrow",
    "searrow", "Harr", "looparrowleft", "swarrow", "hArr", "looparrowright",
    "to", "harr", "Lrarr", "twoheadleftarrow", "hookleftarrow", "lrArr",
    "twoheadrightarrow", "hookrightarrow", "lrarr", "Uarr", "iff", "Lsh",
    "uArr", "impliedby", "mapsto", "uarr", "implies", "nearrow", "uparrow",
    "Larr", "nleftarrow", "Uparrow", "lArr", "nLeftarrow", "updownarrow",
    "larr", "nleftrightarrow", "Updownarrow", "leadsto", "nLeftrightarrow",
    "upharpoonleft", "leftarrow", "nrightarrow", "upharpoonright",
    "Leftarrow", "nRightarrow", "upuparrows", "leftarrowtail", "nwarrow",
    "leftharpoondown", "Rarr",
]

FONT_0 = [
    "rm", "bf", "it", "sf", "tt", "frak", "cal", "Bbb", "bold", "boldsymbol",
    "bm", "mathnormal",
]

SIZE_0 = [
    "Huge", "huge", "LARGE", "Large", "large", "normalsize", "small",
    "footnotesize", "scriptsize", "tiny",
]

STYLE_0 = [
    "displaystyle", "textstyle", "scriptstyle", "scriptscriptstyle",
    "limits", "nolimits", "verb",
]

SYMBOLS_AND_PUNCTUATION_0 = [
    "cdots", "LaTeX", "ddots", "TeX", "ldots", "nabla", "vdots", "infty",
    "dotsb", "infin", "dotsc", "checkmark", "dotsi", "dag", "dotsm",
    "dagger", "dotso", "sdot", "ddag", "mathellipsis", "ddagger", "Box",
    "Dagger", "lq", "square", "angle", "blacksquare", "measuredangle", "rq",
    "triangle", "sphericalangle", "top", "triangledown", "bot", "triangleleft",
    "triangleright", "colon", "bigtriangledown", "backprime", "bigtriangleup",
    "pounds", "prime", "blacktriangle", "mathsterling", "blacktriangledown",
    "blacktriangleleft", "yen", "blacktriangleright", "surd", "diamond",
    "degree", "Diamond", "lozenge", "mho", "blacklozenge", "diagdown",
    "star", "diagup", "bigstar", "flat", "clubsuit", "natural", "copyright",
    "clubs", "sharp", "circledR", "diamondsuit", "heartsuit", "diamonds",
    "spadesuit", "maltese", "hearts", "spades", "minuso",
]

DEBUGGING_0 = ["message", "errmessage", "show"]

# Arity 1

ACCENTS_1 = [
    "tilde", "mathring", "widetilde", "overgroup", "utilde", "undergroup",
    "acute", "vec", "Overrightarrow", "bar", "overleftarrow",
    "overrightarrow", "breve", "underleftarrow", "underrightarrow", "check",
    "overleftharpoon", "overrightharpoon", "dot", "overleftrightarrow",
    "overbrace", "ddot", "underleftrightarrow", "underbrace", "grave",
    "overline", "overlinesegment", "hat", "underline", "underlinesegment",
    "widehat", "widecheck", "underbar",
]

ANNOTATION_1 = ["cancel", "overbrace", "bcancel", "underbrace", "xcancel",
               "sout", "boxed", "phase", "tag", "tag*"]

VERTICAL_LAYOUT_1 = ["substack", "overset", "underset", "stackrel", "raisebox"]

OVERLAP_1 = ["mathllap", "mathrlap", "mathclap", "llap", "rlap", "clap",
            "smash"]

SPACING_1 = ["phantom", "hphantom", "vphantom", "kern", "mkern", "mskip",
            "hskip", "hspace", "hspace*", "mathstrut"]

LOGIC_AND_SET_THEORY_1 = ["not"]

MATH_OPERATORS_1 = ["operatorname", "operatorname*", "operatornamewithlimits"]

SQRT_1 = ["sqrt"]

EXTENSIBLE_ARROWS_1 = [
    "xleftarrow", "xrightarrow", "xLeftarrow", "xRightarrow",
    "xleftrightarrow", "xLeftrightarrow", "xhookleftarrow",
    "xhookrightarrow", "xtwoheadleftarrow", "xtwoheadrightarrow",
    "xleftharpoonup", "xrightharpoonup", "xleftharpoondown",
    "xrightharpoondown", "xleftrightharpoons", "xrightleftharpoons",
    "xtofrom", "xmapsto", "xlongequal",
]

FONT_1 = [
    "mathrm", "mathbf", "mathit", "mathsf", "mathtt", "mathfrak", "mathcal",
    "mathbb", "mathscr", "textrm", "textbf", "textit", "textsf", "texttt",
    "textnormal", "text", "textup", "textmd", "emph", "pmb",
]

BRAKET_NOTATION_1 = ["bra", "Bra", "ket", "Ket", "braket", "Braket"]

CLASS_ASSIGNMENT_1 = [
    "mathbin", "mathclose", "mathinner", "mathop", "mathopen", "mathord",
    "mathpunct", "mathrel",
]

# Arity 2

VERTICAL_LAYOUT_2 = ["stackrel", "overset", "underset", "raisebox"]

BINOMIAL_COEFFICIENTS_2 = ["binom", "dbinom", "tbinom", "brace", "brack"]

FRACTIONS_2 = ["frac", "dfrac", "tfrac", "cfrac", "genfrac"]

COLOR_2 = ["color", "textcolor", "colorbox"]

# Environments for \begin{...}

ENVIRONMENTS = [
    "matrix", "array", "pmatrix", "bmatrix", "vmatrix", "Vmatrix",
    "Bmatrix", "cases", "rcases", "smallmatrix", "subarray", "equation",
    "split", "align", "gather", "alignat", "CD", "darray", "dcases",
    "drcases", "matrix*", "pmatrix*", "bmatrix*", "Bmatrix*", "vmatrix*",
    "Vmatrix*", "equation*", "gather*", "align*", "alignat*", "gathered",
    "aligned", "alignedat",
]
