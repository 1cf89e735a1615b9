# BN254 (alt_bn128) base field modulus
BN254_MODULUS = 0x30644E72E131A029B85045B68181585D97816A916871CA8D3C208C16D87CFD47

# Byte width of a single serialized field element
FIELD_ELEMENT_SIZE = 32

# Byte width of the SP1 verifier selector prefixing a raw proof
SP1_SELECTOR_SIZE = 4


class SP1VerifyingKeyConstants:
    """
    Verifying key points hardcoded in a specific release of SP1's
    Groth16Verifier.sol. G2 coordinates are in powers of i, i.e.
    `x = x0 + x1 * i`, and the contract stores beta, gamma and delta
    with their y coordinate already negated.
    """

    def __init__(self, version, alpha, beta_neg, gamma_neg, delta_neg, s):
        self.version = version
        self.alpha = alpha
        self.beta_neg = beta_neg
        self.gamma_neg = gamma_neg
        self.delta_neg = delta_neg
        self.s = s

    def __repr__(self):
        return f"SP1VerifyingKeyConstants(version={self.version!r})"


SP1_V1_2_0 = SP1VerifyingKeyConstants(
    version="v1.2.0",
    alpha=(
        16824748082761027289403020823817900376175197022851240418647484763478464123198,
        11683994685964714260324343303943939682301299075504304862945838718548302000401,
    ),
    beta_neg=(
        (
            6012203653756052523353542340150469539265082406293136140411872887864191664305,
            6291636065550854379100787904950515357219288186946057578788825789245406766953,
        ),
        (
            8479861103528550966799853659352503798462730898093166661842402674702796622679,
            1633523335605438695154599416411390033345510848756189876127962429956098742451,
        ),
    ),
    gamma_neg=(
        (
            4142835535619576684322245157901312250554378142114381564290468432742521314704,
            17842020501532861335251277735290851172413446056529606168368465340825902541810,
        ),
        (
            11320632725496471124352232673686498720611893913179832806771034178631284892116,
            311895667756833756493099755182157054434816599621289498984920445818614464745,
        ),
    ),
    delta_neg=(
        (
            1401586467118744686649898232509431431936958634904286407525795344840171509724,
            20524563347740346853186643374142185321405370469810755613088256350493061219989,
        ),
        (
            14665335796225261740324266854622393607627804871217389582109229884209518049091,
            4675922494502640538519101370992755143525716960516481658013166874162416756018,
        ),
    ),
    s=(
        # constant term
        (
            8310411565601441527035131496852221148476487246063333349863921483414575409313,
            21343132819492496456805562863075138986248235983567056732949060829719030087739,
        ),
        # vkey
        (
            9193066544127521442507379487110183725565203847410097866655781919341371314500,
            1229953730407424098511641946145120096161248105904311204671469367759481075237,
        ),
        # public values digest
        (
            9302931036688912050769082570627051329799904248848128887752496390619992168298,
            11368205644090635269179087945262736859378503013874730222437645132828283002424,
        ),
    ),
)
