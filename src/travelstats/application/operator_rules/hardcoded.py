"""Hardcoded operator rules.

Curated, empirically observed mappings from lines and stations to the German
(and a few neighbouring) rail and local transit operators that run them.
Träwelling usually reports the operator itself, but often misses local
operators; these rules fill the gap.

Rules are evaluated in the order of HARDCODED_RULES and the first match wins.
Several rules overlap (a city tram operator and a national S-Bahn operator may
both accept "S 7" somewhere), so the order is part of the behaviour.
"""

from travelstats.application.operator_rules.matching import (
    any_contains,
    both_contain,
    line_number,
    matches_any,
    matches_types,
    strict_line_number,
)
from travelstats.domain.contracts.operator_rule import OperatorRule
from travelstats.domain.models.directional_pair import DirectionalPair
from travelstats.domain.models.errors import RuleContractViolation
from travelstats.domain.models.trip_identity import TripIdentity

P = DirectionalPair


class PrefixRule:
    """Operator identified by its own category prefix (e.g., "BRB", "ME")."""

    def __init__(self, name: str, *types: str) -> None:
        self._name = name
        self.types = types

    def matches(self, trip: TripIdentity) -> bool:
        return matches_types(trip.line_name, *self.types)

    def name(self) -> str:
        return self._name


class StartsWithRule:
    """Operator identified by a raw line-name prefix, regardless of spacing."""

    def __init__(self, name: str, prefix: str) -> None:
        self._name = name
        self.prefix = prefix

    def matches(self, trip: TripIdentity) -> bool:
        return trip.line_name.startswith(self.prefix)

    def name(self) -> str:
        return self._name


class DirectionalTableRule:
    """Regional operator recognised by a curated table of lines and endpoints.

    The line must carry one of the category prefixes before the table is
    consulted. Table lookups ignore the direction of travel.
    """

    def __init__(
        self, name: str, types: tuple[str, ...], table: frozenset[DirectionalPair]
    ) -> None:
        self._name = name
        self.types = types
        self.table = table

    def matches(self, trip: TripIdentity) -> bool:
        if not matches_types(trip.line_name, *self.types):
            return False
        return self._in_table(trip)

    def _in_table(self, trip: TripIdentity) -> bool:
        return matches_any(P(trip.line_name, trip.origin, trip.destination), self.table)

    def name(self) -> str:
        return self._name


class LocalTransitRule:
    """City operator: local categories serving stations of its towns.

    With require_both, origin and destination must both be in the same town;
    otherwise touching a town at either end is enough.
    """

    def __init__(
        self,
        name: str,
        towns: tuple[str, ...],
        types: tuple[str, ...],
        require_both: bool = False,
    ) -> None:
        self._name = name
        self.towns = towns
        self.types = types
        self.require_both = require_both

    def matches(self, trip: TripIdentity) -> bool:
        if self.require_both:
            in_town = any(both_contain(trip, town) for town in self.towns)
        else:
            in_town = any_contains(trip, *self.towns)
        return in_town and matches_types(trip.line_name, *self.types)

    def name(self) -> str:
        return self._name


class SBahnRule:
    """S-Bahn network recognised by the towns its lines touch."""

    def __init__(self, name: str, *towns: str) -> None:
        self._name = name
        self.towns = towns

    def matches(self, trip: TripIdentity) -> bool:
        return matches_types(trip.line_name, "S") and any_contains(trip, *self.towns)

    def name(self) -> str:
        return self._name


class AbellioMitteldeutschland(DirectionalTableRule):
    """Abellio; HBX (Harz-Berlin-Express) lines always belong to it."""

    def matches(self, trip: TripIdentity) -> bool:
        if matches_types(trip.line_name, "HBX"):
            return True
        return super().matches(trip)


class DBRegioSuedost(DirectionalTableRule):
    """DB Regio Südost runs most S-Bahn lines around Leipzig, Halle and Dresden."""

    def matches(self, trip: TripIdentity) -> bool:
        if not matches_types(trip.line_name, *self.types):
            return False

        if trip.line_name.startswith("S"):
            # S1, S2, S6, S10
            if any_contains(trip, "Leipzig"):
                return True
            # S3, S5, S5X, S8, S9, S47; S 7 is Abellio
            if any_contains(trip, "Halle") and trip.line_name != "S 7":
                return True
            # S1, S2, S8
            if any_contains(trip, "Dresden", "Bad Schandau"):
                return True
            if any_contains(trip, "Geithain"):
                return True

        return self._in_table(trip)


class DBRegioNordost(DirectionalTableRule):
    """DB Regio Nordost; FEX (Flughafen-Express) always belongs to it."""

    def matches(self, trip: TripIdentity) -> bool:
        if trip.line_name.startswith("FEX"):
            return True
        if not matches_types(trip.line_name, *self.types):
            return False
        # Any RE/RB/S line arriving in Warnemünde, or an S-Bahn leaving it.
        if (
            trip.line_name.startswith("S") and trip.origin == "Warnemünde"
        ) or trip.destination == "Warnemünde":
            return True
        return self._in_table(trip)


class DessauWoerlitzerEisenbahn:
    """DWE trains carry an 8 character label such as "DWE 1234"."""

    def matches(self, trip: TripIdentity) -> bool:
        return len(trip.line_name) == 8 and trip.line_name.startswith("DWE")

    def name(self) -> str:
        return "Dessau-Wörlitzer Eisenbahn"


class CeskeDrahy:
    """EuroCity services to or from Prague, which run on CD rolling stock."""

    def matches(self, trip: TripIdentity) -> bool:
        return trip.line_name.startswith("EC") and (
            trip.origin == "Praha hl.n." or trip.destination == "Praha hl.n."
        )

    def name(self) -> str:
        return "České dráhy"


class BremerStrassenbahn:
    """BSAG runs trams and city buses numbered up to 100 within Bremen."""

    def matches(self, trip: TripIdentity) -> bool:
        if not both_contain(trip, "Bremen"):
            return False
        if not matches_types(trip.line_name, "STR", "Bus"):
            return False
        number = strict_line_number(trip.line_name)
        return number is not None and number <= 100

    def name(self) -> str:
        return "Bremer Straßenbahn AG"


class DresdnerVerkehrsbetriebe:
    """DVB: all Dresden and Radebeul trams, Dresden buses below 100, rail replacement buses."""

    def matches(self, trip: TripIdentity) -> bool:
        line = trip.line_name
        if matches_types(line, "BusEV"):
            return True
        if not matches_types(line, "STR", "Bus"):
            return False

        if matches_types(line, "STR") and any_contains(trip, "Radebeul", "Dresden"):
            return True

        if not any_contains(trip, "Dresden"):
            return False

        # Unnumbered lines default to 100 and are left to regional operators.
        return line_number(line, default=100) < 100

    def name(self) -> str:
        return "Dresdner Verkehrsbetriebe"


class VerkehrsgesellschaftHoyerswerda:
    """VGH runs the Hoyerswerda city buses 1 to 5."""

    def matches(self, trip: TripIdentity) -> bool:
        if not matches_types(trip.line_name, "Bus"):
            return False
        if not any_contains(trip, "Hoyerswerda"):
            return False
        number = strict_line_number(trip.line_name)
        return number is not None and number <= 5

    def name(self) -> str:
        return "Verkehrsgesellschaft Hoyerswerda mbH"


class RegionalverkehrSaechsischeSchweiz:
    """RVSOE runs the regional buses into Dresden, numbered from 100 upwards."""

    def matches(self, trip: TripIdentity) -> bool:
        # TODO: RVSOE buses also run without touching Dresden
        if "Dresden" not in trip.origin + trip.destination:
            return False
        if not matches_types(trip.line_name, "Bus"):
            return False
        # Unnumbered lines default to 0 and are left to DVB. Line 166 is the
        # one exception operated by DVB and is still assigned here.
        return line_number(trip.line_name, default=0) >= 100

    def name(self) -> str:
        return "Regionalverkehr Sächsische Schweiz-Osterzgebirge GmbH"


class HallescheVerkehrs:
    """HAVAG runs Halle trams and buses numbered below 300 plus the "E" specials."""

    def matches(self, trip: TripIdentity) -> bool:
        if not any_contains(trip, "Halle"):
            return False
        if not matches_types(trip.line_name, "STR", "Bus"):
            return False
        last = trip.line_name.split(" ")[-1]
        if last == "E":
            return True
        if not last.isdecimal():
            raise RuleContractViolation(
                self.name(), f"expected a numeric line suffix, got {trip.line_name!r}"
            )
        try:
            number = int(last)
        except ValueError as e:
            raise RuleContractViolation(
                self.name(), "numeric line suffix is too long to be a line number"
            ) from e
        # Buses numbered 300 and up belong to OBS.
        return number < 300

    def name(self) -> str:
        return "Hallesche Verkehrs-AG"


class OmnibusbetriebSaalekreis:
    """OBS runs the Saalekreis buses numbered from 300 upwards."""

    def matches(self, trip: TripIdentity) -> bool:
        # TODO: OBS buses also run without both ends in Halle
        if not both_contain(trip, "Halle"):
            return False
        if not matches_types(trip.line_name, "Bus"):
            return False
        return line_number(trip.line_name, default=0) >= 300

    def name(self) -> str:
        return "Omnibusbetrieb Saalekreis"


class VerkehrsverbundStuttgart:
    """Stuttgart light rail ("STB", not "STR") and buses."""

    def matches(self, trip: TripIdentity) -> bool:
        if "Stuttgart" not in trip.origin + trip.destination:
            return False
        return matches_types(trip.line_name, "STB", "Bus")

    def name(self) -> str:
        return "Verkehrs- und Tarifverbund Stuttgart GmbH"


# https://www.abellio.de/verkehr-aktuell
ABRM = AbellioMitteldeutschland(
    "Abellio Rail Mitteldeutschland",
    ("RE", "RB", "S"),
    frozenset(
        {
            P("S 7", "Halle(Saale)Hbf", "Lutherstadt Eisleben"),
            P("RB 20", None, "Leipzig Hbf"),
            P("RB 20", "Eisenach", "Halle(Saale)Hbf"),
            P("RB 25", "Halle(Saale)Hbf", "Saalfeld(Saale)"),
            P("RB 35", "Stendal Hbf", "Wolfsburg Hbf"),
            P("RB 36", "Magdeburg Hbf", "Wolfsburg Hbf"),
            P("RB 59", "Erfurt Hbf", "Sangerhausen"),
            P("RE 4", "Halle(Saale)Hbf", "Goslar"),
            P("RE 6", "Magdeburg Hbf", "Wolfsburg Hbf"),
            P("RE 9", "Halle(Saale)Hbf", "Kassel-Wilhelmshöhe"),
            P("RE 10", "Magdeburg Hbf", "Erfurt Hbf"),
            P("RE 11", "Magdeburg Hbf", "Thale Hbf"),
            P("RE 11", "Halberstadt", "Thale Hbf"),
            P("RE 16", "Halle(Saale)Hbf", None),
            P("RE 17", "Erfurt Hbf", "Naumburg(Saale)Hbf"),
            P("RE 21", None, "Goslar"),
            P("RE 31", None, "Blankenburg(Harz)"),
        }
    ),
)

DB_REGIO_SUEDOST = DBRegioSuedost(
    "DB Regio AG Südost",
    ("RE", "RB", "S"),
    frozenset(
        {
            P("RE 1", "Göttingen", "Glauchau(Sachs)"),
            P("RE 2", "Kassel-Wilhelmshöhe", "Erfurt Hbf"),
            P("RE 3", "Erfurt Hbf", None),
            P("RE 7", "Erfurt Hbf", "Würzburg Hbf"),
            P("RE 13", "Magdeburg Hbf", "Leipzig Hbf"),
            P("RE 14", "Magdeburg Hbf", "Falkenberg(Elster)"),
            P("RE 18", "Halle(Saale)Hbf", "Jena-Göschwitz"),
            P("RE 19", "Dresden Hbf", "Kurort Altenberg(Erzgebirge)"),
            P("RE 20", "Dresden Hbf", "Schöna(Gr)"),
            P("RE 20", None, "Uelzen"),
            P("RE 30", "Magdeburg Hbf", "Halle(Saale)Hbf"),
            P("RE 50", "Leipzig Hbf", "Dresden Hbf"),
            P("RE 55", "Nordhausen", "Erfurt Hbf"),
            P("RE 56", "Nordhausen", "Erfurt Hbf"),
            P("RE 57", "Bad Kissingen", "Würzburg Hbf"),
            P("RB U 28", "Schöna", "Sebnitz(Sachs)"),
            P("RB 32", "Stendal Hbf", "Salzwedel"),
            P("RB 33", "Dresden Hbf", "Königsbrück"),
            P("RB 34", "Dresden Hbf", "Senftenberg"),
            P("RB 40", "Braunschweig Hbf", None),
            P("RB 51", "Dessau Hbf", "Falkenberg(Elster)"),
            P("RB 51", "Lutherstadt Wittenberg Hbf", "Falkenberg(Elster)"),
            P("RB 52", "Leinefelde", "Erfurt Hbf"),
            P("RB 53", "Bad Langensalza", "Gotha"),
            P("RB 71", "Sebnitz(Sachs)", "Pirna"),
            P("RB 72", "Kurort Altenberg(Erzgebirge)", "Heidenau"),
            P("RB 76", "Weißenfels", "Zeitz"),
            P("RB 78", "Querfurt", "Merseburg Hbf"),
            P("RB 113", "Leipzig Hbf", "Geithain"),
            P("S 1", "Meißen Triebischtal", "Schöna"),
            P("S 1", "Schönebeck-Bad Salzelmen", "Wittenberge"),
            P("S 4", "Markkleeberg-Gaschwitz", None),
        }
    ),
)

DB_REGIO_NORD = DirectionalTableRule(
    "DB Regio AG Nord",
    ("RE", "RB", "S"),
    frozenset(
        {
            P("RE 6", "Westerland(Sylt)", None),
            P("RE 7", "Kiel Hbf", None),
            P("RE 7", "Flensburg", None),
            P("RE 8", "Lübeck Hbf", None),
            P("RE 70", "Kiel Hbf", None),
            P("RE 80", "Lübeck Hbf", None),
            P("RB 85", "Lübeck Hbf", None),
            P("RE 86", "Lübeck-Travemünde Strand", None),
            P("RB 86", "Lübeck-Travemünde Strand", None),
        }
    ),
)

DB_REGIO_NRW = DirectionalTableRule(
    "DB Regio AG NRW",
    ("RE", "RB", "S"),
    frozenset(
        {
            P("RE 9", "Aachen Hbf", None),
            P("RB 20", "Stolberg (Rheinl) Hbf", None),
            P("RB 20", "Stolberg(Rheinl)Hbf", None),
            P("RB 24", "Kall", None),
            P("RB 25", "Overath", None),
            P("RB 27", "Koblenz Hbf", None),
            P("RB 33", "Aachen Hbf", None),
        }
    ),
)

DB_REGIO_NORDOST = DBRegioNordost(
    "DB Regio AG Nordost",
    ("RE", "RB", "S"),
    frozenset(
        {
            P("RE 1", "Hamburg Hbf", "Rostock Hbf"),
            P("RE 2", "Nauen", "Cottbus Hbf"),
            P("RE 2", "Berlin Ostbahnhof", "Cottbus Hbf"),
            P("RE 3", "Schwedt(Oder)", "Lutherstadt Wittenberg Hbf"),
            P("RE 3", "Stralsund Hbf", None),
            P("RE 3", "Eberswalde Hbf", "Halle(Saale)Hbf"),
            P("RE 4", "Lübeck Hbf", "Grambow"),
            P("RE 4", "Pasewalk", "Ueckermünde Stadthafen"),
            P("RE 4", "Neubrandenburg", "Lübeck Hbf"),
            P("RE 4", "Elstal", "Jüterbog"),
            P("RE 4", "Stendal Hbf", "Falkenberg(Elster)"),
            P("RE 5", None, "Berlin Südkreuz"),
            P("RE 6", "Wittenberge", "Berlin-Charlottenburg"),
            P("RE 7", "Dessau Hbf", None),
            P("RE 7", "Senftenberg", "Königs Wusterhausen"),
            P("RE 7", "Stralsund Hbf", "Greifswald"),
            P("RE 10", "Leipzig Hbf", None),
            P("RB 10", "Nauen", "Berlin Südkreuz"),
            P("RB 11", "Wismar", "Tessin"),
            P("RE 11", "Leipzig Hbf", "Hoyerswerda"),
            P("RB 12", "Bad Doberan", "Ostseeheilbad Graal-Müritz"),
            P("RB 12", "Rostock Hbf", "Ribnitz-Damgarten West"),
            P("RE 13", "Cottbus Hbf", "Elsterwerda"),
            P("RB 14", "Nauen", "Berlin Südkreuz"),
            P("RE 15", "Hoyerswerda", "Dresden Hbf"),
            P("RB 17", None, "Ludwigslust"),
            P("RB 18", "Bad Kleinen", "Schwerin Hbf"),
            P("RE 18", "Cottbus Hbf", "Dresden-Neustadt"),
            P("RB 20", "Oranienburg", "Potsdam Griebnitzsee"),
            P("RB 21", "Potsdam Hbf", "Berlin Gesundbrunnen"),
            P("RB 22", "Potsdam Griebnitzsee", "Königs Wusterhausen"),
            P("RB 23", "Golm", "Flughafen BER - Terminal 1-2"),
            P("RB 23", "Züssow", "Swinoujscie Centrum"),
            P("RB 24 Nord", "Eberswalde Hbf", "Flughafen BER - Terminal 5 (Schönefeld)"),
            P("RB 24 Süd", "Flughafen BER - Terminal 1-2", "Wünsdorf-Waldstadt"),
            P("RB 24", "Zinnowitz", "Peenemünde"),
            P("RB 25", "Barth", "Velgast"),
            P("RB 31", "Elsterwerda-Biehla", "Dresden Hbf"),
            P("RB 32 Süd", "Elsterwerda-Biehla", "Dresden Hbf"),
            P("RB 32 Nord", "Oranienburg", "Flughafen BER - Terminal 5 (Schönefeld)"),
            P("RB 43", "Falkenberg(Elster)", "Frankfurt(Oder)"),
            P("RB 49", "Cottbus Hbf", "Falkenberg(Elster)"),
            P("RB 55", "Kremmen", "Henningsdorf(Berlin)"),
            P("RB 66", "Angermünde", "Tantow"),
            P("RE 66", "Berlin Gesundbrunnen", "Tantow"),
            P("RB 92", "Cottbus Hbf", "Guben"),
        }
    ),
)

DB_REGIO_MITTE = DirectionalTableRule(
    "DB Regio Mitte",
    ("RE", "RB"),
    frozenset(
        {
            P("RE 1", "Koblenz Hbf", "Mannheim Hbf"),
            P("RE 2", "Koblenz Hbf", "Frankfurt(Main)Hbf"),
            P("RE 4", "Karlsruhe Hbf", "Frankfurt(Main)Hbf"),
            P("RE 6", "Karlsruhe Hbf", "Kaiserslautern Hbf"),
            P("RE 9", "Karlsruhe Hbf", "Mannheim Hbf"),
            P("RE 14", "Frankfurt(Main)Hbf", "Mannheim Hbf"),
            P("RE 20", "Frankfurt(Main)Hbf", "Limburg(Lahn)"),
            P("RB 22", "Frankfurt(Main)Hbf", "Limburg(Lahn)"),
            P("RB 23", "Mayen Ost", "Limburg(Lahn)"),
            P("RE 25", "Gießen", "Koblenz Hbf"),
            P("RE 30", "Kassel Hbf", "Frankfurt(Main)Hbf"),
            P("RE 34", "Glauburg-Stockheim", "Frankfurt(Main)Hbf"),
            P("RB 35", "Bingen(Rhein) Stadt", "Worms Hbf"),
            P("RB 38", "Andernach", "Kaisersesch"),
            P("RB 40", "Dillenburg", "Frankfurt(Main)Hbf"),
            P("RE 40", "Mannheim Hbf", "Freudenstadt"),
        }
    ),
)

ODEG = DirectionalTableRule(
    "Ostdeutsche Eisenbahn GmbH",
    ("RE", "RB"),
    frozenset(
        {
            P("RE 1", "Magdeburg Hbf", None),
            P("RE 1", "Frankfurt(Oder)", None),
            P("RE 2", "Berlin-Charlottenburg", "Wismar"),
            P("RB 33", "Jüterbog", "Potsdam Hbf"),
            P("RB 64", "Görlitz", "Hoyerswerda"),
            P("RE 8", "Wismar", None),
            P("RB 65", "Cottbus Hbf", "Zittau"),
        }
    ),
)

ERFURTER_BAHN = DirectionalTableRule(
    "Erfurter Bahn",
    ("RE", "RB"),
    frozenset(
        {
            P("RE 12", "Leipzig Hbf", None),
            P("RE 50", "Erfurt Hbf", None),
            P("RB 22", "Leipzig Hbf", None),
            P("RB 23", "Erfurt Hbf", None),
            P("RB 13", "Leipzig Hbf", None),
            P("RB 13", "Gera Hbf", None),
        }
    ),
)

MRB = DirectionalTableRule(
    "Mitteldeutsche Regiobahn",
    ("RE", "RB"),
    frozenset(
        {
            P("RB 30", "Dresden Hbf", "Zwickau(Sachs)Hbf"),
            P("RB 45", "Chemnitz Hbf", "Elsterwerda"),
            P("RB 110", "Leipzig Hbf", "Döbeln"),
            P("RE 3", "Dresden Hbf", "Hof Hbf"),
            P("RE 6", "Leipzig Hbf", "Chemnitz Hbf"),
        }
    ),
)

# Assigns every IC to DB Fernverkehr, although some state-ordered IC services
# are run by regional operators.
DB_FERNVERKEHR = PrefixRule("DB Fernverkehr AG", "ICE", "IC")

# Trams, buses and ferries are not in the API Träwelling uses.
GVB = LocalTransitRule(
    "Gemeente Vervoerbedrijf Amsterdam", ("Amsterdam",), ("U",), require_both=True
)
BVG = LocalTransitRule(
    "Berliner Verkehrsbetriebe", ("Berlin",), ("STR", "U", "Bus"), require_both=True
)


HARDCODED_RULES: tuple[OperatorRule, ...] = (
    ABRM,
    PrefixRule("alex - Die Länderbahn", "ALX"),
    PrefixRule("Bayrische Regiobahn", "BRB"),
    BremerStrassenbahn(),
    BVG,
    CeskeDrahy(),
    DB_FERNVERKEHR,
    DB_REGIO_NRW,
    DB_REGIO_NORD,
    DB_REGIO_NORDOST,
    DB_REGIO_SUEDOST,
    DB_REGIO_MITTE,
    DresdnerVerkehrsbetriebe(),
    LocalTransitRule("Dessauer Verkehrs-GmbH", ("Dessau",), ("STR", "Bus")),
    DessauWoerlitzerEisenbahn(),
    ERFURTER_BAHN,
    LocalTransitRule("Erfurter Verkehrsbetriebe", ("Erfurt",), ("STR", "Bus")),
    PrefixRule("erixx", "erx"),
    PrefixRule("FlixTrain", "FLX"),
    GVB,
    LocalTransitRule("Verkehrs- und Betriebsgesellschaft Gera", ("Gera",), ("STR", "Bus")),
    HallescheVerkehrs(),
    PrefixRule("Koleje Dolnośląskie", "KD"),
    LocalTransitRule("Leipziger Verkehrsbetriebe", ("Leipzig", "Schkeuditz"), ("STR", "Bus")),
    MRB,
    PrefixRule("metronom", "ME"),
    StartsWithRule("Nordbahn Eisenbahngesellschaft", "NBE"),
    PrefixRule("Nordwestbahn", "NWB"),
    LocalTransitRule("Naumburger Straßenbahn GmbH", ("Naumburg",), ("STR",)),
    OmnibusbetriebSaalekreis(),
    ODEG,
    # RailJets and NightJets; CityJets are sold under regional categories.
    PrefixRule("ÖBB", "RJ", "RJX", "NJ"),
    PrefixRule("Oberpfalzbahn - Die Länderbahn", "OPX"),
    RegionalverkehrSaechsischeSchweiz(),
    SBahnRule("S-Bahn Berlin", "Berlin", "Bernau", "Potsdam"),
    SBahnRule("S-Bahn Hamburg", "Hamburg", "Stade"),
    SBahnRule("S-Bahn München", "München", "Tutzing"),
    SBahnRule("S-Bahn Stuttgart", "Stuttgart"),
    PrefixRule("SNCF", "TGV"),
    # Only the Metropolexpress lines; SWEG RE/RB lines need a curated table.
    StartsWithRule("SWEG Bahn Stuttgart GmbH", "MEX"),
    PrefixRule("trilex - Die Länderbahn", "TLX", "TL"),
    LocalTransitRule(
        "Verkehrsbetriebe Brandenburg an der Havel GmbH",
        ("Brandenburg an der Havel",),
        ("STR", "Bus"),
    ),
    VerkehrsgesellschaftHoyerswerda(),
    VerkehrsverbundStuttgart(),
    LocalTransitRule("ViP Verkehrsbetrieb Potsdam GmbH", ("Potsdam",), ("STR", "Bus")),
    PrefixRule("Westfalenbahn", "WFB"),
    LocalTransitRule("Würzburger Versorgungs- und Verkehrs-GmbH", ("Würzburg",), ("STR", "Bus")),
)
