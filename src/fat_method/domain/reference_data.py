"""Hand-curated reference data for the oils and fats ranking.

Nothing here is computed: measurements, consumption history, display orders
and user-facing texts are published as-is. Scores are derived from these
constants in :mod:`fat_method.services.scorecards`.
"""

from types import MappingProxyType

from fat_method.domain.fats import (
    BaseMeasurement,
    CriterionDoc,
    FaqEntry,
    ScaleStep,
    Usage,
)

MENTION_METHODE = "Méthode détaillée : mangeurperdu.com/fat"

OLIVE_EV = "Huile d'olive extra vierge"
OLIVE_RAFFINEE = "Huile d'olive raffinée"
COLZA_EV = "Huile de colza extra vierge"
COLZA_RAFFINEE = "Huile de colza raffinée"
LIN = "Huile de lin"
CHANVRE = "Huile de chanvre"
NOIX = "Huile de noix"
AVOCAT_EV = "Huile d'avocat extra vierge"
AVOCAT = "Huile d'avocat"
ARACHIDE = "Huile d'arachide"
SESAME = "Huile de sésame"
TOURNESOL = "Huile de tournesol"
MAIS = "Huile de maïs"
SOJA = "Huile de soja"
PEPINS_RAISIN = "Huile de pépins de raisin"
BEURRE = "Beurre"
GRAISSE_CANARD = "Graisse de canard"
GHEE = "Ghee"
COCO = "Huile de coco"
SAINDOUX = "Saindoux"
SUIF = "Suif de bœuf"

ANIMAL_FAT_NAMES = frozenset({SUIF, SAINDOUX, GRAISSE_CANARD, GHEE, BEURRE})

# Out of scope for raw use (seasoning, cold consumption).
CRU_EXCLUDED_NAMES = frozenset({BEURRE, GRAISSE_CANARD, GHEE, COCO, SAINDOUX, SUIF})

# Same product, same history (extra virgin and refined share their years).
OIL_CONSUMPTION_YEARS: MappingProxyType[str, int] = MappingProxyType(
    {
        OLIVE_EV: 4000,
        OLIVE_RAFFINEE: 4000,
        COLZA_EV: 200,
        COLZA_RAFFINEE: 200,
        LIN: 3000,
        CHANVRE: 2000,
        NOIX: 2000,
        AVOCAT_EV: 50,
        AVOCAT: 50,
        ARACHIDE: 150,
        SESAME: 4000,
        TOURNESOL: 200,
        MAIS: 100,
        SOJA: 100,
        PEPINS_RAISIN: 50,
        BEURRE: 4000,
        GRAISSE_CANARD: 4000,
        GHEE: 4000,
        COCO: 4000,
        SAINDOUX: 4000,
        SUIF: 4000,
    }
)


def _base(  # noqa: PLR0913
    omega6: float,
    omega3: float,
    saturated: float,
    stability: float,
    refining: float,
    smoke_point: float,
) -> BaseMeasurement:
    return BaseMeasurement(
        omega6_pct=omega6,
        omega3_pct=omega3,
        saturated_pct=saturated,
        stability_index=stability,
        refining_level=refining,
        smoke_point_c=smoke_point,
    )


# omega-6 %, omega-3 %, saturated %, stability 0-25, refining 0-5, smoke point °C
OIL_BASE_DATA: MappingProxyType[str, BaseMeasurement] = MappingProxyType(
    {
        OLIVE_EV: _base(10, 0.8, 14, 18, 0, 190),
        OLIVE_RAFFINEE: _base(10, 0.8, 14, 20, 3, 240),
        COLZA_EV: _base(20, 9, 7, 8, 0, 105),
        COLZA_RAFFINEE: _base(20, 9, 7, 12, 4, 204),
        LIN: _base(14, 55, 10, 1, 1, 107),
        CHANVRE: _base(55, 18, 10, 2, 1, 165),
        NOIX: _base(52, 10, 9, 2, 1, 160),
        AVOCAT_EV: _base(13, 1, 12, 15, 2, 270),
        AVOCAT: _base(13, 1, 12, 15, 2, 270),
        ARACHIDE: _base(32, 0, 17, 12, 2, 230),
        SESAME: _base(41, 0.3, 14, 4, 2, 210),
        TOURNESOL: _base(65, 0, 11, 3, 4, 230),
        MAIS: _base(54, 1, 13, 4, 4, 230),
        SOJA: _base(51, 7, 15, 4, 4, 230),
        PEPINS_RAISIN: _base(70, 0.3, 10, 0, 3, 216),
        BEURRE: _base(2, 0.5, 51, 15, 2, 120),
        GRAISSE_CANARD: _base(13, 0.5, 33, 18, 1, 190),
        GHEE: _base(2, 0.5, 65, 22, 2, 252),
        COCO: _base(2, 0, 87, 25, 1, 177),
        SAINDOUX: _base(10, 0.5, 39, 20, 1, 190),
        SUIF: _base(2, 0.5, 50, 25, 1, 250),
    }
)

DISPLAY_ORDER: MappingProxyType[Usage, tuple[str, ...]] = MappingProxyType(
    {
        Usage.CRU: (
            OLIVE_EV,
            COLZA_EV,
            LIN,
            OLIVE_RAFFINEE,
            CHANVRE,
            NOIX,
            AVOCAT_EV,
            COLZA_RAFFINEE,
            ARACHIDE,
            SESAME,
            TOURNESOL,
            MAIS,
            SOJA,
            PEPINS_RAISIN,
            BEURRE,
            GRAISSE_CANARD,
            GHEE,
            COCO,
            SAINDOUX,
            SUIF,
        ),
        Usage.DOUCE: (
            OLIVE_EV,
            SUIF,
            COCO,
            SAINDOUX,
            GRAISSE_CANARD,
            GHEE,
            BEURRE,
            OLIVE_RAFFINEE,
            AVOCAT,
            COLZA_RAFFINEE,
            ARACHIDE,
            SESAME,
            COLZA_EV,
            CHANVRE,
            NOIX,
            LIN,
            TOURNESOL,
            MAIS,
            SOJA,
            PEPINS_RAISIN,
        ),
        Usage.HAUTE: (
            SUIF,
            COCO,
            GHEE,
            SAINDOUX,
            GRAISSE_CANARD,
            AVOCAT,
            OLIVE_RAFFINEE,
            OLIVE_EV,
            BEURRE,
            ARACHIDE,
            COLZA_RAFFINEE,
            SESAME,
            COLZA_EV,
            NOIX,
            CHANVRE,
            LIN,
            TOURNESOL,
            MAIS,
            SOJA,
            PEPINS_RAISIN,
        ),
    }
)

OILS_TO_AVOID = (
    "Tournesol",
    "Maïs",
    "Soja",
    "Pépins de raisin",
    "Mélanges « huile végétale »",
)

# Criterion labels shared by the scorecards, weightings and documentation.
RATIO = "Ratio ω6/ω3"
OMEGA6_BAS = "ω6 bas"
OMEGA3 = "ω3"
STABILITE = "Stabilité"
RAFFINAGE = "Raffinage"
POINT_DE_FUMEE = "Point de fumée"
ANCIENNETE = "Ancienneté"
SATURES = "Saturés"


def _scale(*labels: str) -> tuple[ScaleStep, ...]:
    """Build a scale from labels given for notes 5 down to 0."""
    return tuple(
        ScaleStep(note=5 - index, label=label) for index, label in enumerate(labels)
    )


CRITERIA_DOCUMENTATION: tuple[CriterionDoc, ...] = (
    CriterionDoc(
        criterion=RATIO,
        description=(
            "Équilibre entre acides gras oméga-6 et oméga-3. Plus le ratio est bas, "
            "mieux c’est (recommandation courante : proche de 1:1 à 4:1)."
        ),
        scale=_scale(
            "Ratio ≤ 1 (idéal type 1:1)",
            "Ratio ≤ 2",
            "Ratio ≤ 4",
            "Ratio ≤ 10",
            "Ratio ≤ 20",
            "Ratio > 20 ou ω3 négligeable",
        ),
    ),
    CriterionDoc(
        criterion=OMEGA6_BAS,
        description=(
            "Teneur en oméga-6 (% des acides gras). Moins il y a de ω6, mieux c’est "
            "(éviter l’excès de linoléique)."
        ),
        scale=_scale(
            "ω6 < 5 %", "ω6 < 10 %", "ω6 < 15 %", "ω6 < 25 %", "ω6 < 35 %", "ω6 ≥ 35 %"
        ),
    ),
    CriterionDoc(
        criterion=OMEGA3,
        description=(
            "Teneur en oméga-3 (% des acides gras). Plus il y a de ω3, mieux c’est."
        ),
        scale=_scale(
            "ω3 ≥ 50 %", "ω3 ≥ 30 %", "ω3 ≥ 15 %", "ω3 ≥ 5 %", "ω3 ≥ 1 %", "ω3 < 1 %"
        ),
    ),
    CriterionDoc(
        criterion=STABILITE,
        description=(
            "Résistance à l’oxydation (indice type Rancimat, 0–25). Plus la graisse "
            "est stable à la chaleur, mieux c’est."
        ),
        scale=_scale(
            "Indice ≥ 20 (très stable)",
            "Indice ≥ 15",
            "Indice ≥ 10",
            "Indice ≥ 5",
            "Indice ≥ 2",
            "Indice < 2 (très peu stable)",
        ),
    ),
    CriterionDoc(
        criterion=RAFFINAGE,
        description=(
            "Degré de transformation. Moins raffiné = meilleur pour le goût et les "
            "micronutriments (extra vierge = note max)."
        ),
        scale=_scale(
            "Extra vierge / non raffinée",
            "Vierge / traitement minimal",
            "Raffinage léger",
            "Raffinée (classique)",
            "Très raffinée",
            "Industrielle (solvant, désodorisation)",
        ),
    ),
    CriterionDoc(
        criterion=f"{POINT_DE_FUMEE} (cuisson douce)",
        description=(
            "Température de fumage en °C. Pour la cuisson douce (≤ 160 °C), un point "
            "de fumée ≥ 160 °C est suffisant."
        ),
        scale=_scale(
            "≥ 200 °C", "≥ 180 °C", "≥ 160 °C", "≥ 140 °C", "≥ 120 °C", "< 120 °C"
        ),
    ),
    CriterionDoc(
        criterion=f"{POINT_DE_FUMEE} (cuisson haute)",
        description=(
            "Température de fumage en °C. Pour la cuisson haute (friture, > 160 °C), "
            "un point de fumée élevé est nécessaire."
        ),
        scale=_scale(
            "≥ 220 °C", "≥ 200 °C", "≥ 180 °C", "≥ 160 °C", "≥ 140 °C", "< 140 °C"
        ),
    ),
    CriterionDoc(
        criterion=ANCIENNETE,
        description=(
            "Depuis combien de temps l’huile ou la graisse est consommée par "
            "l’humain. Valorise les usages éprouvés."
        ),
        scale=_scale(
            "Consommation depuis au moins 400 ans",
            "Depuis moins de 400 ans",
            "Depuis moins de 300 ans",
            "Depuis moins de 200 ans",
            "Depuis moins de 100 ans",
            "Depuis moins de 50 ans",
        ),
    ),
    CriterionDoc(
        criterion=SATURES,
        description=(
            "Teneur en acides gras saturés (% des AG). Utilisé uniquement pour la "
            "cuisson douce et la cuisson haute. On pénalise un peu les graisses très "
            "riches en saturés, pour rester ouvert aux théories qui les ont longtemps "
            "diabolisés (les données récentes les réhabilitent en partie ; le critère "
            "reste pondéré faiblement, 5)."
        ),
        scale=_scale(
            "Saturés < 15 %",
            "Saturés < 25 %",
            "Saturés < 35 %",
            "Saturés < 50 %",
            "Saturés < 65 %",
            "Saturés ≥ 65 %",
        ),
    ),
)

# Ordered from the model's logic down to specific cases.
FAQ: tuple[FaqEntry, ...] = (
    FaqEntry(
        question=(
            "Pourquoi le classement change-t-il selon l'usage (cru, cuisson douce, "
            "cuisson haute) ?"
        ),
        answer=(
            "Chaque critère est noté sur 5 et pondéré selon l'usage. Le modèle ne "
            "modifie pas les données de base mais l'importance relative des critères. "
            "À cru, l'équilibre lipidique (ratio ω6/ω3), le degré de raffinage et la "
            "qualité intrinsèque de la graisse comptent davantage. En cuisson douce, "
            "la stabilité oxydative et la résistance thermique prennent le pas, tout "
            "en gardant une composante d'évaluation nutritionnelle. En cuisson haute, "
            "la résistance à l'oxydation et le point de fumée deviennent "
            "déterminants, la stabilité chimique à haute température étant "
            "prioritaire. Les scores affichés correspondent à la version actuelle du "
            "modèle, issus d'un système de pondération prédéfini."
        ),
    ),
    FaqEntry(
        question="D'où viennent les scores sur 100 ?",
        answer=(
            "Les scores sont dérivés de données de base (composition en acides gras, "
            "stabilité, degré de raffinage, point de fumée, ancienneté d'usage) et de "
            "grilles de notation explicites (0/5 à 5/5) pour chaque critère. Chaque "
            "note est convertie en contribution (note/5 × poids), puis les "
            "contributions sont sommées pour obtenir le total sur 100. Vous pouvez "
            "consulter la section « Comprendre les notes » dans la Méthode pour le "
            "détail des grilles."
        ),
    ),
    FaqEntry(
        question="Le modèle est-il biaisé en faveur des graisses animales ?",
        answer=(
            "Le modèle ne privilégie ni les graisses animales ni les huiles végétales "
            "en tant que catégories. Il applique des critères mesurables pour le "
            "classement : stabilité à l'oxydation, point de fumée, degré de "
            "raffinage, profil en acides gras, ancienneté d'usage, avec des "
            "pondérations adaptées à chaque usage. Si certaines graisses animales "
            "figurent en tête pour la cuisson haute, c'est en raison de leur forte "
            "stabilité oxydative et de leur faible teneur en acides gras "
            "polyinsaturés, donc d'une moindre sensibilité à la dégradation "
            "thermique. Inversement, nombre d'huiles végétales excellent à cru grâce "
            "à leur profil en oméga-3 ou à un raffinage limité. Le classement reflète "
            "ces critères objectifs, pas une préférence idéologique."
        ),
    ),
    FaqEntry(
        question="Le modèle est-il évolutif ?",
        answer=(
            "Oui. Le modèle est volontairement versionné. Les pondérations retenues "
            "comportent une part d'arbitraire, tout en s'appuyant sur des données "
            "scientifiques (oxydation, stabilité thermique, composition lipidique). "
            "L'objectif est la transparence : les critères sont affichés, les poids "
            "peuvent évoluer. Si de nouvelles données robustes émergent ou si le "
            "consensus scientifique évolue, les pondérations pourront être ajustées. "
            "Le classement constitue une photographie méthodologique à un instant "
            "donné, pas une vérité figée."
        ),
    ),
    FaqEntry(
        question="Que recouvrent les termes « cuisson douce » et « cuisson haute » ?",
        answer=(
            "La cuisson douce correspond typiquement à des températures inférieures "
            "ou égales à 160 °C (vapeur, étouffée, poêle à feu doux). La cuisson "
            "haute désigne les températures au-dessus de 160 °C (rissolage, friture, "
            "environ 160–200 °C et plus). La frontière entre les deux est fixée ici à "
            "160 °C ; elle peut varier selon les sources."
        ),
    ),
    FaqEntry(
        question="Que mesure concrètement le critère de stabilité à l'oxydation ?",
        answer=(
            "L'oxydation des lipides est une dégradation chimique qui altère la "
            "qualité des graisses et peut générer des composés indésirables "
            "(rancissement, perte de nutriments). La chaleur et l'oxygène accélèrent "
            "ce phénomène. Le critère « stabilité à l'oxydation » reflète la "
            "résistance de la graisse à cette dégradation ; il s'appuie sur des "
            "indicateurs mesurables (par exemple un indice de type Rancimat). Plus "
            "une graisse est stable, moins elle se dégrade rapidement à la chaleur. "
            "C'est pourquoi ce critère est central pour les usages en cuisson : il "
            "permet de distinguer les graisses adaptées au chauffage de celles qui "
            "sont plus fragiles et à réserver de préférence à cru."
        ),
    ),
    FaqEntry(
        question="Une huile stable est-elle forcément saine ?",
        answer=(
            "Non. La stabilité thermique indique uniquement la résistance à "
            "l'oxydation et à la dégradation à la chaleur. Une graisse très stable "
            "peut convenir à la friture sans produire rapidement des composés "
            "oxydés, sans pour autant être « idéale » dans tous les contextes "
            "nutritionnels. Le modèle distingue les usages : à cru, le profil en "
            "acides gras et le degré de transformation comptent davantage ; en "
            "cuisson haute, la priorité est de limiter une oxydation excessive. La "
            "stabilité est un critère fonctionnel, pas un label santé absolu."
        ),
    ),
    FaqEntry(
        question="Qu'est-ce que le point de fumée ?",
        answer=(
            "Le point de fumée est la température à laquelle une huile ou une graisse "
            "commence à fumer et à se dégrader. Au-delà, des composés indésirables "
            "peuvent se former et le goût s'altérer. Plus le point de fumée est "
            "élevé, plus la graisse convient aux cuissons à feu vif ; c'est ce "
            "critère (avec la stabilité à l'oxydation, pondérée à part) qui guide le "
            "classement pour la cuisson douce et la cuisson haute."
        ),
    ),
    FaqEntry(
        question="Pourquoi l'ancienneté d'usage est-elle prise en compte ?",
        answer=(
            "L'ancienneté ne signifie pas « ancien = meilleur ». Ce critère intègre "
            "une dimension historique et anthropologique : certaines graisses sont "
            "consommées depuis des siècles ou des millénaires dans différentes "
            "cultures, ce qui offre un recul empirique important. C'est un critère "
            "secondaire (pondération faible), qui permet toutefois de distinguer des "
            "produits très récents dans l'alimentation humaine des graisses "
            "traditionnelles dont les usages culinaires et les effets à long terme "
            "sont mieux documentés. Il n'est pas absolu ; il contribue au score sans "
            "en être le seul déterminant."
        ),
    ),
    FaqEntry(
        question="Pourquoi la pondération sur les graisses saturées est si basse ?",
        answer=(
            "Les graisses saturées ont longtemps été diabolisées (maladies "
            "cardiovasculaires, cholestérol), mais les données scientifiques récentes "
            "nuance fortement ce discours : le lien n'est pas aussi net qu'on l'a cru, "
            "et le contexte alimentaire global compte davantage. On garde donc un "
            "critère « Saturés » pour refléter cette prudence historique, mais avec "
            "une pondération faible (5 sur 100) : on ne souhaite pas sur-pénaliser "
            "des graisses comme le beurre, le ghee ou l'huile de coco au seul motif "
            "de leur teneur en saturés."
        ),
    ),
    FaqEntry(
        question=(
            "Pourquoi une telle différence entre extra vierge et raffinée (olive, "
            "colza) ?"
        ),
        answer=(
            "L'extra vierge est obtenue par extraction à froid, sans raffinage : elle "
            "conserve polyphénols, vitamines et goût, ce qui la rend particulièrement "
            "adaptée à cru. En revanche, elle est plus sensible à l'oxydation à forte "
            "chaleur et son point de fumée est plus bas. La raffinée subit un procédé "
            "physique ou chimique (chaleur, parfois solvants), qui lui donne un goût "
            "neutre, un point de fumée plus élevé et une meilleure stabilité en "
            "friture, mais au prix d'une perte importante de micronutriments et "
            "d'antioxydants — elle est donc moins intéressante à cru. Le classement "
            "reflète ces compromis selon l'usage."
        ),
    ),
    FaqEntry(
        question=(
            "Pourquoi l'huile d'olive raffinée peut-elle dépasser l'extra vierge en "
            "cuisson haute ?"
        ),
        answer=(
            "En cuisson haute, deux critères dominent : stabilité à l'oxydation et "
            "point de fumée. L'huile d'olive raffinée, ayant subi un processus de "
            "purification, possède généralement un point de fumée plus élevé et une "
            "meilleure résistance thermique que l'extra vierge. L'huile d'olive extra "
            "vierge conserve davantage de composés bioactifs (polyphénols), ce qui "
            "est un avantage à cru, mais ces composés peuvent se dégrader à très "
            "haute température. Le classement ne dit donc pas que la raffinée est "
            "« meilleure » globalement ; il indique qu'elle est plus adaptée à un "
            "usage spécifique (cuisson intense)."
        ),
    ),
    FaqEntry(
        question="Pourquoi certaines graisses sont N/A à cru ?",
        answer=(
            "Les graisses animales (suif, saindoux, graisse de canard, ghee, beurre) "
            "ne sont pas évaluées à cru dans ce classement : l'usage « à cru » "
            "concerne les huiles pour assaisonnement ou consommation froide. Les "
            "graisses animales sont donc hors périmètre pour cet usage."
        ),
    ),
)


def is_vegan(name: str) -> bool:
    """Return True unless the product is an animal fat."""
    return name not in ANIMAL_FAT_NAMES
