"""
Lexicon — Static Data Tables

The builtin vocabulary and the word lists behind the heuristic guards.

Everything in this module is loaded once at import and is read-only at
runtime. User-supplied vocabulary lives in the VocabularyStore
(vocabulary.py) and never modifies these tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class Candidate:
    """A proposed sophisticated synonym for a simple word."""
    word: str
    pos: str = "unknown"          # "adj", "verb", ...
    domain: str = "general"       # e.g. "physical", "emotional"
    definition: str = ""
    examples: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class IdiomPattern:
    """A fixed phrase in which the keyed word must not be replaced."""
    phrase: str
    meaning: str


def _c(word: str, pos: str, domain: str, definition: str, examples: tuple[str, ...]) -> Candidate:
    return Candidate(word=word, pos=pos, domain=domain, definition=definition, examples=examples)


# Characters stripped from the edges of whitespace tokens
TOKEN_PUNCTUATION = ".,!?;:'\"()-"


# ============================================================
# BUILTIN VOCABULARY
# Schema: simple word -> ordered candidates
# ============================================================

_VOCABULARY: dict[str, tuple[Candidate, ...]] = {
    # Temperature
    "hot": (
        _c("scalding", "adj", "physical", "extremely hot, burning", (
            "The scalding water burned his hand.",
            "She dropped the scalding coffee.",
            "The scalding sun beat down on them.",
        )),
        _c("sweltering", "adj", "physical", "uncomfortably hot", (
            "The sweltering heat made it hard to breathe.",
            "We escaped the sweltering afternoon.",
            "The sweltering room needed air conditioning.",
        )),
        _c("torrid", "adj", "physical", "very hot and dry", (
            "The torrid climate dried the land.",
            "They survived the torrid summer.",
            "The torrid zone receives intense sunlight.",
        )),
        _c("scorching", "adj", "physical", "intensely hot", (
            "The scorching pavement burned her feet.",
            "We endured the scorching temperatures.",
            "The scorching wind carried desert sand.",
        )),
    ),
    "cold": (
        _c("frigid", "adj", "physical", "extremely cold", (
            "The frigid air froze their breath.",
            "She shivered in the frigid water.",
            "The frigid temperatures broke records.",
        )),
        _c("glacial", "adj", "physical", "icy cold", (
            "The glacial wind cut through their coats.",
            "His glacial stare silenced the room.",
            "The glacial pace frustrated everyone.",
        )),
        _c("arctic", "adj", "physical", "extremely cold", (
            "The arctic conditions halted construction.",
            "They braved the arctic temperatures.",
            "The arctic blast swept the city.",
        )),
        _c("frosty", "adj", "physical", "cold with frost", (
            "The frosty morning covered the grass.",
            "Her frosty reception was unexpected.",
            "The frosty windowpanes obscured the view.",
        )),
    ),

    # Size
    "big": (
        _c("enormous", "adj", "size", "extremely large", (
            "The enormous building dominated the skyline.",
            "An enormous crowd gathered.",
            "The task required enormous effort.",
        )),
        _c("colossal", "adj", "size", "extraordinarily large", (
            "The colossal statue amazed visitors.",
            "A colossal mistake cost them dearly.",
            "The colossal wave destroyed everything.",
        )),
        _c("immense", "adj", "size", "extremely large or great", (
            "The immense forest stretched for miles.",
            "She felt immense gratitude.",
            "The immense pressure was overwhelming.",
        )),
        _c("mammoth", "adj", "size", "huge, enormous", (
            "The mammoth project took years.",
            "A mammoth effort was required.",
            "The mammoth structure impressed everyone.",
        )),
        _c("gargantuan", "adj", "size", "enormous, gigantic", (
            "The gargantuan feast lasted hours.",
            "His gargantuan appetite was legendary.",
            "The gargantuan task seemed impossible.",
        )),
    ),
    "small": (
        _c("minuscule", "adj", "size", "extremely small", (
            "The minuscule text was hard to read.",
            "A minuscule amount remained.",
            "The minuscule insect escaped notice.",
        )),
        _c("diminutive", "adj", "size", "extremely small", (
            "The diminutive figure stood in the corner.",
            "Her diminutive stature belied her strength.",
            "The diminutive plant bloomed beautifully.",
        )),
        _c("microscopic", "adj", "size", "extremely small, invisible to naked eye", (
            "The microscopic organisms multiplied.",
            "A microscopic crack caused the failure.",
            "The microscopic details revealed the truth.",
        )),
        _c("infinitesimal", "adj", "size", "extremely small", (
            "The infinitesimal chance still existed.",
            "An infinitesimal difference separated them.",
            "The infinitesimal particles floated.",
        )),
    ),

    # Speed
    "fast": (
        _c("rapid", "adj", "temporal", "happening quickly", (
            "The rapid growth surprised analysts.",
            "Rapid changes transformed the industry.",
            "The rapid heartbeat signaled anxiety.",
        )),
        _c("swift", "adj", "temporal", "moving quickly", (
            "The swift response saved lives.",
            "A swift current carried the boat.",
            "Her swift action prevented disaster.",
        )),
        _c("expeditious", "adj", "temporal", "quick and efficient", (
            "The expeditious handling impressed clients.",
            "An expeditious solution was needed.",
            "The expeditious process saved time.",
        )),
        _c("brisk", "adj", "temporal", "quick and energetic", (
            "The brisk pace tired the group.",
            "A brisk wind refreshed them.",
            "The brisk business kept them busy.",
        )),
    ),
    "slow": (
        _c("sluggish", "adj", "temporal", "slow-moving, lacking energy", (
            "The sluggish economy worried investors.",
            "He felt sluggish after lunch.",
            "The sluggish response frustrated users.",
        )),
        _c("lethargic", "adj", "temporal", "sluggish and apathetic", (
            "The lethargic patient needed rest.",
            "A lethargic attitude pervaded the office.",
            "The lethargic market showed little activity.",
        )),
        _c("leisurely", "adj", "temporal", "unhurried, relaxed", (
            "They enjoyed a leisurely breakfast.",
            "The leisurely pace suited them.",
            "A leisurely stroll calmed her nerves.",
        )),
        _c("gradual", "adj", "temporal", "happening slowly over time", (
            "The gradual change went unnoticed.",
            "A gradual improvement was evident.",
            "The gradual decline worried experts.",
        )),
    ),

    # Quality
    "good": (
        _c("excellent", "adj", "quality", "extremely good", (
            "The excellent performance earned applause.",
            "She has excellent taste.",
            "The excellent results exceeded expectations.",
        )),
        _c("superb", "adj", "quality", "of the highest quality", (
            "The superb craftsmanship was evident.",
            "A superb meal awaited them.",
            "The superb view took their breath away.",
        )),
        _c("exemplary", "adj", "quality", "serving as a desirable model", (
            "His exemplary behavior inspired others.",
            "The exemplary work earned recognition.",
            "She set an exemplary standard.",
        )),
        _c("outstanding", "adj", "quality", "exceptionally good", (
            "The outstanding achievement was celebrated.",
            "An outstanding performance impressed critics.",
            "Her outstanding dedication was recognized.",
        )),
        _c("impeccable", "adj", "quality", "flawless, perfect", (
            "His impeccable manners charmed everyone.",
            "The impeccable timing was crucial.",
            "Her impeccable record spoke for itself.",
        )),
    ),
    "bad": (
        _c("atrocious", "adj", "quality", "horrifyingly bad", (
            "The atrocious conditions shocked inspectors.",
            "His atrocious behavior was unacceptable.",
            "The atrocious weather ruined the event.",
        )),
        _c("deplorable", "adj", "quality", "deserving strong condemnation", (
            "The deplorable state of affairs demanded action.",
            "Deplorable conditions persisted.",
            "The deplorable treatment was condemned.",
        )),
        _c("abysmal", "adj", "quality", "extremely bad", (
            "The abysmal performance disappointed fans.",
            "Abysmal grades threatened his future.",
            "The abysmal service drove customers away.",
        )),
        _c("dreadful", "adj", "quality", "causing great suffering or fear", (
            "The dreadful news devastated the family.",
            "A dreadful mistake was made.",
            "The dreadful storm caused havoc.",
        )),
        _c("appalling", "adj", "quality", "causing shock or dismay", (
            "The appalling lack of care was evident.",
            "Appalling statistics emerged.",
            "The appalling decision backfired.",
        )),
    ),

    # Emotions - Happy
    "happy": (
        _c("elated", "adj", "emotional", "ecstatically happy", (
            "She was elated by the news.",
            "The elated crowd cheered loudly.",
            "He felt elated after winning.",
        )),
        _c("jubilant", "adj", "emotional", "feeling or expressing great happiness", (
            "The jubilant fans celebrated.",
            "A jubilant atmosphere filled the room.",
            "They were jubilant over the victory.",
        )),
        _c("ecstatic", "adj", "emotional", "feeling overwhelming happiness", (
            "She was ecstatic about the promotion.",
            "The ecstatic response surprised everyone.",
            "He felt ecstatic seeing her again.",
        )),
        _c("euphoric", "adj", "emotional", "intensely happy and confident", (
            "The euphoric feeling lasted for days.",
            "A euphoric crowd filled the streets.",
            "She felt euphoric after the achievement.",
        )),
        _c("exuberant", "adj", "emotional", "filled with lively energy and excitement", (
            "The exuberant children played happily.",
            "His exuberant personality attracted friends.",
            "The exuberant celebration continued.",
        )),
    ),

    # Emotions - Sad
    "sad": (
        _c("melancholy", "adj", "emotional", "a feeling of pensive sadness", (
            "A melancholy mood settled over her.",
            "The melancholy music touched their hearts.",
            "He felt melancholy on rainy days.",
        )),
        _c("despondent", "adj", "emotional", "in low spirits from loss of hope", (
            "The despondent athlete gave up.",
            "She grew despondent after the rejection.",
            "The despondent patient needed support.",
        )),
        _c("morose", "adj", "emotional", "sullen and ill-tempered", (
            "His morose attitude worried his friends.",
            "The morose expression never left his face.",
            "She became morose after the loss.",
        )),
        _c("forlorn", "adj", "emotional", "pitifully sad and lonely", (
            "The forlorn puppy waited by the door.",
            "A forlorn hope remained.",
            "She looked forlorn sitting alone.",
        )),
        _c("woeful", "adj", "emotional", "characterized by or full of sorrow", (
            "The woeful tale brought tears.",
            "A woeful expression crossed her face.",
            "The woeful situation demanded attention.",
        )),
    ),

    # Difficulty
    "difficult": (
        _c("arduous", "adj", "mental", "involving great effort", (
            "The arduous journey tested their limits.",
            "An arduous task lay ahead.",
            "The arduous climb was worth it.",
        )),
        _c("formidable", "adj", "mental", "inspiring fear or respect through difficulty", (
            "The formidable challenge awaited.",
            "A formidable opponent emerged.",
            "The formidable task required expertise.",
        )),
        _c("onerous", "adj", "mental", "involving heavy burden", (
            "The onerous duties exhausted him.",
            "An onerous responsibility was assigned.",
            "The onerous regulations frustrated businesses.",
        )),
        _c("strenuous", "adj", "physical", "requiring great effort", (
            "The strenuous workout left her tired.",
            "A strenuous effort was made.",
            "The strenuous activity built strength.",
        )),
        _c("laborious", "adj", "mental", "requiring much time and effort", (
            "The laborious process took months.",
            "A laborious task was completed.",
            "The laborious research paid off.",
        )),
    ),
    "hard": (
        _c("challenging", "adj", "mental", "testing one's abilities", (
            "The challenging exam stumped many.",
            "A challenging problem emerged.",
            "The challenging situation required creativity.",
        )),
        _c("demanding", "adj", "mental", "requiring much skill or effort", (
            "The demanding boss expected perfection.",
            "A demanding schedule left no time.",
            "The demanding role tested her skills.",
        )),
        _c("rigorous", "adj", "mental", "extremely thorough and demanding", (
            "The rigorous training prepared them.",
            "A rigorous analysis was conducted.",
            "The rigorous standards ensured quality.",
        )),
        _c("grueling", "adj", "physical", "extremely tiring and demanding", (
            "The grueling marathon tested endurance.",
            "A grueling schedule wore them down.",
            "The grueling work finally ended.",
        )),
    ),
    "easy": (
        _c("effortless", "adj", "mental", "requiring no effort", (
            "The effortless grace impressed judges.",
            "An effortless victory was achieved.",
            "She made it look effortless.",
        )),
        _c("straightforward", "adj", "mental", "uncomplicated and easy to understand", (
            "The straightforward instructions helped.",
            "A straightforward approach worked best.",
            "The straightforward solution was obvious.",
        )),
        _c("facile", "adj", "mental", "easily achieved", (
            "The facile explanation oversimplified.",
            "A facile solution emerged.",
            "The facile assumption proved wrong.",
        )),
        _c("elementary", "adj", "mental", "basic and simple", (
            "The elementary concepts were clear.",
            "An elementary mistake was made.",
            "The elementary level suited beginners.",
        )),
    ),

    # Light
    "bright": (
        _c("luminous", "adj", "light", "full of or shedding light", (
            "The luminous stars filled the sky.",
            "A luminous glow surrounded her.",
            "The luminous display attracted attention.",
        )),
        _c("radiant", "adj", "light", "sending out light, shining", (
            "The radiant sun warmed the earth.",
            "Her radiant smile lit up the room.",
            "The radiant colors dazzled visitors.",
        )),
        _c("brilliant", "adj", "light", "very bright and intense", (
            "The brilliant light blinded them.",
            "A brilliant flash illuminated the sky.",
            "The brilliant diamond sparkled.",
        )),
        _c("resplendent", "adj", "light", "impressive through brightness", (
            "The resplendent palace amazed tourists.",
            "She looked resplendent in her gown.",
            "The resplendent sunset painted the sky.",
        )),
    ),
    "dark": (
        _c("murky", "adj", "light", "dark and gloomy", (
            "The murky water hid dangers.",
            "A murky past haunted him.",
            "The murky depths were unexplored.",
        )),
        _c("shadowy", "adj", "light", "full of shadows", (
            "The shadowy figure disappeared.",
            "A shadowy alley led nowhere.",
            "The shadowy room felt oppressive.",
        )),
        _c("somber", "adj", "light", "dark or dull in color", (
            "The somber clouds gathered.",
            "A somber mood pervaded.",
            "The somber occasion called for silence.",
        )),
        _c("tenebrous", "adj", "light", "dark, shadowy", (
            "The tenebrous forest was forbidding.",
            "A tenebrous atmosphere surrounded the castle.",
            "The tenebrous corners hid secrets.",
        )),
    ),

    # Movement
    "walk": (
        _c("saunter", "verb", "movement", "walk in a slow, relaxed manner", (
            "He sauntered into the room.",
            "She sauntered along the beach.",
            "They sauntered through the park.",
        )),
        _c("stroll", "verb", "movement", "walk in a leisurely way", (
            "They strolled through the garden.",
            "She strolled down the street.",
            "We strolled along the riverbank.",
        )),
        _c("amble", "verb", "movement", "walk at a slow, relaxed pace", (
            "The horse ambled along the trail.",
            "He ambled through the market.",
            "She ambled towards the exit.",
        )),
        _c("trudge", "verb", "movement", "walk slowly with heavy steps", (
            "They trudged through the snow.",
            "He trudged up the hill.",
            "She trudged home after work.",
        )),
    ),
    "run": (
        _c("sprint", "verb", "movement", "run at full speed", (
            "He sprinted to catch the bus.",
            "She sprinted across the finish line.",
            "They sprinted to escape the rain.",
        )),
        _c("dash", "verb", "movement", "run or move quickly", (
            "She dashed to the store.",
            "He dashed across the street.",
            "They dashed to meet the deadline.",
        )),
        _c("bolt", "verb", "movement", "move or run away suddenly", (
            "The horse bolted from the stable.",
            "He bolted from the room.",
            "She bolted when she saw danger.",
        )),
        _c("scurry", "verb", "movement", "move hurriedly with short quick steps", (
            "The mice scurried across the floor.",
            "People scurried for shelter.",
            "She scurried to finish on time.",
        )),
    ),

    # Cognition
    "think": (
        _c("contemplate", "verb", "mental", "look thoughtfully at for a long time", (
            "She contemplated her next move.",
            "He contemplated the meaning of life.",
            "They contemplated the offer carefully.",
        )),
        _c("ponder", "verb", "mental", "think about something carefully", (
            "He pondered the question.",
            "She pondered her options.",
            "They pondered the implications.",
        )),
        _c("deliberate", "verb", "mental", "engage in careful thought", (
            "The jury deliberated for hours.",
            "She deliberated before deciding.",
            "They deliberated on the matter.",
        )),
        _c("ruminate", "verb", "mental", "think deeply about something", (
            "He ruminated on past mistakes.",
            "She ruminated over the decision.",
            "They ruminated about the future.",
        )),
        _c("cogitate", "verb", "mental", "think deeply about something", (
            "He cogitated on the problem.",
            "She cogitated before answering.",
            "They cogitated for days.",
        )),
    ),
    "understand": (
        _c("comprehend", "verb", "mental", "grasp mentally", (
            "She couldn't comprehend the concept.",
            "He finally comprehended the instructions.",
            "They struggled to comprehend the situation.",
        )),
        _c("fathom", "verb", "mental", "understand after much thought", (
            "He couldn't fathom her motives.",
            "She fathomed the mystery.",
            "They couldn't fathom the depth of the problem.",
        )),
        _c("discern", "verb", "mental", "perceive or recognize", (
            "She discerned a pattern.",
            "He discerned the truth.",
            "They discerned the hidden meaning.",
        )),
        _c("grasp", "verb", "mental", "seize and hold firmly; understand", (
            "He grasped the concept quickly.",
            "She grasped the opportunity.",
            "They grasped the significance.",
        )),
    ),

    # Strength
    "strong": (
        _c("robust", "adj", "physical", "strong and healthy", (
            "The robust economy grew steadily.",
            "A robust constitution helped him recover.",
            "The robust flavor pleased everyone.",
        )),
        _c("formidable", "adj", "physical", "inspiring fear or respect through strength", (
            "The formidable warrior defeated all.",
            "A formidable presence commanded attention.",
            "The formidable defense held firm.",
        )),
        _c("stalwart", "adj", "physical", "loyal, reliable, and hardworking", (
            "The stalwart supporter never wavered.",
            "A stalwart defender protected them.",
            "The stalwart team member contributed greatly.",
        )),
        _c("sturdy", "adj", "physical", "strongly built", (
            "The sturdy bridge held the weight.",
            "A sturdy frame supported the structure.",
            "The sturdy table lasted years.",
        )),
    ),
    "weak": (
        _c("frail", "adj", "physical", "weak and delicate", (
            "The frail patient needed care.",
            "A frail voice called out.",
            "The frail structure collapsed.",
        )),
        _c("feeble", "adj", "physical", "lacking physical strength", (
            "The feeble attempt failed.",
            "A feeble excuse was given.",
            "The feeble light flickered.",
        )),
        _c("fragile", "adj", "physical", "easily broken or damaged", (
            "The fragile vase was handled carefully.",
            "A fragile ecosystem needed protection.",
            "The fragile truce held briefly.",
        )),
        _c("debilitated", "adj", "physical", "made weak or infirm", (
            "The debilitated patient rested.",
            "A debilitated economy struggled.",
            "The debilitated army retreated.",
        )),
    ),

    # Truth
    "true": (
        _c("authentic", "adj", "quality", "genuine, not false", (
            "The authentic document was verified.",
            "An authentic experience awaited.",
            "The authentic flavor was unmistakable.",
        )),
        _c("genuine", "adj", "quality", "truly what it is said to be", (
            "The genuine concern was appreciated.",
            "A genuine smile crossed her face.",
            "The genuine article was rare.",
        )),
        _c("veritable", "adj", "quality", "being truly so called", (
            "A veritable feast awaited them.",
            "The veritable treasure was found.",
            "She was a veritable expert.",
        )),
        _c("bona fide", "adj", "quality", "genuine, real", (
            "A bona fide offer was made.",
            "The bona fide credentials were checked.",
            "The bona fide hero was honored.",
        )),
    ),
    "false": (
        _c("spurious", "adj", "quality", "not genuine, false", (
            "The spurious claim was rejected.",
            "A spurious argument was made.",
            "The spurious evidence was dismissed.",
        )),
        _c("fraudulent", "adj", "quality", "obtained by deception", (
            "The fraudulent scheme was exposed.",
            "A fraudulent transaction occurred.",
            "The fraudulent documents were confiscated.",
        )),
        _c("counterfeit", "adj", "quality", "made in exact imitation with intent to deceive", (
            "The counterfeit bills were detected.",
            "A counterfeit product was sold.",
            "The counterfeit signature was obvious.",
        )),
        _c("bogus", "adj", "quality", "not genuine, fake", (
            "The bogus story was disproven.",
            "A bogus claim was filed.",
            "The bogus credentials were discovered.",
        )),
    ),

    # Temporal
    "old": (
        _c("ancient", "adj", "temporal", "belonging to the very distant past", (
            "The ancient ruins attracted tourists.",
            "An ancient tradition continued.",
            "The ancient civilization left artifacts.",
        )),
        _c("antiquated", "adj", "temporal", "old-fashioned or outdated", (
            "The antiquated system needed updating.",
            "An antiquated law was reformed.",
            "The antiquated equipment was replaced.",
        )),
        _c("archaic", "adj", "temporal", "very old or old-fashioned", (
            "The archaic language was difficult.",
            "An archaic custom persisted.",
            "The archaic methods were abandoned.",
        )),
        _c("venerable", "adj", "temporal", "accorded great respect because of age", (
            "The venerable institution celebrated.",
            "A venerable leader was honored.",
            "The venerable tradition continued.",
        )),
    ),
    "new": (
        _c("novel", "adj", "temporal", "new and original", (
            "The novel approach surprised everyone.",
            "A novel idea emerged.",
            "The novel technique was patented.",
        )),
        _c("innovative", "adj", "temporal", "introducing new ideas", (
            "The innovative design won awards.",
            "An innovative solution was found.",
            "The innovative company led the industry.",
        )),
        _c("nascent", "adj", "temporal", "just beginning to develop", (
            "The nascent movement gained followers.",
            "A nascent industry emerged.",
            "The nascent idea needed development.",
        )),
        _c("unprecedented", "adj", "temporal", "never done or known before", (
            "The unprecedented event shocked everyone.",
            "An unprecedented opportunity arose.",
            "The unprecedented growth continued.",
        )),
    ),

    # Appearance
    "beautiful": (
        _c("exquisite", "adj", "quality", "extremely beautiful and delicate", (
            "The exquisite jewelry sparkled.",
            "An exquisite meal was served.",
            "The exquisite detail impressed everyone.",
        )),
        _c("stunning", "adj", "quality", "extremely impressive or attractive", (
            "The stunning view amazed visitors.",
            "A stunning performance captivated audiences.",
            "The stunning revelation shocked them.",
        )),
        _c("gorgeous", "adj", "quality", "beautiful, very attractive", (
            "The gorgeous sunset painted the sky.",
            "A gorgeous dress caught her eye.",
            "The gorgeous scenery inspired artists.",
        )),
        _c("ravishing", "adj", "quality", "delightful, entrancing", (
            "The ravishing beauty enchanted all.",
            "A ravishing display amazed viewers.",
            "The ravishing melody soothed them.",
        )),
    ),
    "ugly": (
        _c("grotesque", "adj", "quality", "comically or repulsively ugly", (
            "The grotesque statue stood alone.",
            "A grotesque figure emerged.",
            "The grotesque scene disturbed viewers.",
        )),
        _c("hideous", "adj", "quality", "ugly or disgusting to look at", (
            "The hideous creature appeared.",
            "A hideous mistake was made.",
            "The hideous wallpaper was removed.",
        )),
        _c("repulsive", "adj", "quality", "arousing intense distaste", (
            "The repulsive smell drove them away.",
            "A repulsive act was committed.",
            "The repulsive behavior was condemned.",
        )),
        _c("unsightly", "adj", "quality", "unpleasant to look at", (
            "The unsightly building was demolished.",
            "An unsightly stain remained.",
            "The unsightly mess was cleaned.",
        )),
    ),

    # Other qualities
    "strange": (
        _c("peculiar", "adj", "quality", "strange or odd", (
            "A peculiar smell filled the room.",
            "The peculiar behavior raised questions.",
            "She had a peculiar way of speaking.",
        )),
        _c("bizarre", "adj", "quality", "very strange or unusual", (
            "The bizarre incident puzzled everyone.",
            "A bizarre coincidence occurred.",
            "The bizarre story was hard to believe.",
        )),
        _c("anomalous", "adj", "quality", "deviating from what is standard", (
            "The anomalous data was investigated.",
            "An anomalous result emerged.",
            "The anomalous situation required attention.",
        )),
        _c("eccentric", "adj", "quality", "unconventional and slightly strange", (
            "The eccentric artist lived alone.",
            "An eccentric habit annoyed others.",
            "The eccentric millionaire donated generously.",
        )),
    ),
    "important": (
        _c("crucial", "adj", "quality", "of great importance", (
            "The crucial decision was made.",
            "A crucial moment arrived.",
            "The crucial evidence was presented.",
        )),
        _c("pivotal", "adj", "quality", "of crucial importance", (
            "The pivotal role was assigned.",
            "A pivotal moment changed everything.",
            "The pivotal meeting decided the outcome.",
        )),
        _c("paramount", "adj", "quality", "more important than anything else", (
            "Safety is paramount.",
            "A paramount concern was addressed.",
            "The paramount issue was resolved.",
        )),
        _c("vital", "adj", "quality", "absolutely necessary", (
            "Vital information was shared.",
            "A vital component was missing.",
            "The vital signs were stable.",
        )),
    ),
    "clear": (
        _c("lucid", "adj", "mental", "expressed clearly, easy to understand", (
            "The lucid explanation helped.",
            "A lucid moment came to him.",
            "The lucid writing impressed readers.",
        )),
        _c("transparent", "adj", "quality", "easy to perceive or detect", (
            "The transparent motives were obvious.",
            "A transparent process was established.",
            "The transparent material allowed light through.",
        )),
        _c("explicit", "adj", "quality", "stated clearly and in detail", (
            "The explicit instructions were helpful.",
            "An explicit warning was given.",
            "The explicit content was restricted.",
        )),
        _c("unambiguous", "adj", "quality", "not open to more than one interpretation", (
            "The unambiguous message was received.",
            "An unambiguous statement was made.",
            "The unambiguous results confirmed the theory.",
        )),
    ),
    "secret": (
        _c("clandestine", "adj", "quality", "kept secret or done secretively", (
            "The clandestine meeting was held.",
            "A clandestine operation was conducted.",
            "The clandestine affair was discovered.",
        )),
        _c("covert", "adj", "quality", "not openly acknowledged", (
            "The covert mission succeeded.",
            "A covert glance was exchanged.",
            "The covert actions were revealed.",
        )),
        _c("surreptitious", "adj", "quality", "kept secret because disapproved of", (
            "The surreptitious entry was detected.",
            "A surreptitious look was cast.",
            "The surreptitious recording was illegal.",
        )),
        _c("furtive", "adj", "quality", "attempting to avoid notice", (
            "The furtive glance betrayed him.",
            "A furtive movement was spotted.",
            "The furtive behavior aroused suspicion.",
        )),
    ),
}

VOCABULARY = MappingProxyType(_VOCABULARY)


# ============================================================
# ANTONYM PAIRS
# Hand-curated; lookup is order independent
# ============================================================

_ANTONYM_PAIRS = [
    # Emotion
    ("happy", "sad"), ("happy", "miserable"), ("happy", "unhappy"),
    ("elated", "despondent"), ("jubilant", "morose"),
    ("ecstatic", "melancholy"), ("euphoric", "forlorn"),

    # Temperature
    ("hot", "cold"), ("scalding", "frigid"), ("sweltering", "glacial"),
    ("torrid", "arctic"), ("scorching", "frosty"),

    # Size
    ("big", "small"), ("enormous", "minuscule"), ("colossal", "diminutive"),
    ("immense", "microscopic"), ("mammoth", "infinitesimal"), ("gargantuan", "tiny"),

    # Speed
    ("fast", "slow"), ("rapid", "sluggish"), ("swift", "lethargic"),
    ("expeditious", "leisurely"), ("brisk", "gradual"),

    # Quality
    ("good", "bad"), ("excellent", "terrible"), ("superb", "atrocious"),
    ("exemplary", "deplorable"), ("outstanding", "abysmal"), ("impeccable", "dreadful"),

    # Intelligence
    ("smart", "stupid"), ("astute", "obtuse"), ("intelligent", "foolish"),

    # Appearance
    ("beautiful", "ugly"), ("gorgeous", "hideous"), ("exquisite", "grotesque"),
    ("stunning", "repulsive"), ("ravishing", "unsightly"),

    # Strength
    ("strong", "weak"), ("robust", "frail"), ("stalwart", "feeble"),
    ("sturdy", "fragile"), ("formidable", "debilitated"),

    # Difficulty
    ("easy", "difficult"), ("effortless", "arduous"), ("straightforward", "formidable"),
    ("facile", "onerous"), ("elementary", "laborious"),

    # Wealth
    ("rich", "poor"), ("affluent", "destitute"), ("wealthy", "impoverished"),

    # Truth
    ("true", "false"), ("authentic", "fake"), ("genuine", "spurious"),
    ("veritable", "fraudulent"), ("bona fide", "bogus"),

    # Light
    ("bright", "dark"), ("luminous", "murky"), ("radiant", "shadowy"),
    ("brilliant", "somber"), ("resplendent", "tenebrous"),

    # Age
    ("old", "young"), ("ancient", "modern"), ("antiquated", "contemporary"),
    ("archaic", "new"), ("venerable", "nascent"),

    # Actions and states
    ("success", "failure"), ("friend", "enemy"), ("love", "hate"),
    ("accept", "reject"), ("increase", "decrease"),
    ("open", "closed"), ("visible", "invisible"),
]

ANTONYM_PAIRS: frozenset[frozenset[str]] = frozenset(
    frozenset(pair) for pair in _ANTONYM_PAIRS
)


# ============================================================
# IDIOMS
# A match is a literal substring of the lowercased sentence
# ============================================================

def _idioms(*pairs: tuple[str, str]) -> tuple[IdiomPattern, ...]:
    return tuple(IdiomPattern(phrase=p, meaning=m) for p, m in pairs)


IDIOMS = MappingProxyType({
    "hot": _idioms(
        ("hot dog", "food"),
        ("hot water", "trouble"),
        ("hot air", "empty talk"),
        ("hot shot", "important person"),
        ("hot potato", "controversial issue"),
        ("hot head", "quick temper"),
        ("hot under the collar", "angry"),
    ),
    "cold": _idioms(
        ("cold feet", "nervousness"),
        ("cold shoulder", "ignore"),
        ("cold turkey", "stop abruptly"),
        ("cold blood", "cruelty/calm"),
        ("cold war", "tension without conflict"),
        ("cold fish", "unemotional person"),
    ),
    "big": _idioms(
        ("big deal", "important/sarcasm"),
        ("big shot", "important person"),
        ("big picture", "overall view"),
        ("big cheese", "important person"),
        ("big mouth", "talks too much"),
    ),
    "small": _idioms(
        ("small talk", "casual conversation"),
        ("small fry", "unimportant people"),
        ("small potatoes", "insignificant"),
        ("small world", "coincidence"),
    ),
    "good": _idioms(
        ("good riddance", "relief at departure"),
        ("good grief", "exclamation"),
        ("good for nothing", "useless"),
        ("good samaritan", "helpful stranger"),
    ),
    "bad": _idioms(
        ("bad blood", "hostility"),
        ("bad apple", "troublemaker"),
        ("bad egg", "dishonest person"),
        ("bad rap", "unfair criticism"),
    ),
    "happy": _idioms(
        ("happy medium", "compromise"),
        ("happy go lucky", "carefree"),
        ("happy camper", "satisfied person"),
    ),
    "fast": _idioms(
        ("fast track", "accelerated path"),
        ("fast food", "quick service food"),
        ("fast and loose", "irresponsible"),
        ("fast asleep", "deeply sleeping"),
    ),
    "slow": _idioms(
        ("slow poke", "slow person"),
        ("slow burn", "gradual anger"),
        ("slow motion", "reduced speed"),
    ),
    "run": _idioms(
        ("run of the mill", "ordinary"),
        ("run amok", "go wild"),
        ("run the gamut", "cover full range"),
    ),
    "walk": _idioms(
        ("walk of life", "occupation/position"),
        ("walk the walk", "act on words"),
        ("walk on eggshells", "be careful"),
    ),
    "dark": _idioms(
        ("dark horse", "unknown competitor"),
        ("dark side", "negative aspect"),
        ("in the dark", "uninformed"),
    ),
    "bright": _idioms(
        ("bright side", "positive aspect"),
        ("bright idea", "clever thought"),
        ("bright and early", "very early"),
    ),
    "old": _idioms(
        ("old hat", "outdated"),
        ("old flame", "former lover"),
        ("old school", "traditional"),
    ),
    "new": _idioms(
        ("new blood", "fresh members"),
        ("new leaf", "fresh start"),
        ("brand new", "completely new"),
    ),
})


# ============================================================
# PROPER NOUNS
# ============================================================

PROPER_NOUN_PATTERNS: tuple[str, ...] = (
    "hot springs", "cold spring", "cold war",
    "new york", "new jersey", "new orleans", "new hampshire",
    "new mexico", "new zealand", "new england",
    "great britain", "great lakes", "big apple", "big ben",
    "red sea", "white house", "black sea", "dead sea",
    "good friday", "old testament", "new testament",
)

# Followed by a capitalized word, these mark a name
TITLE_PATTERNS: tuple[str, ...] = (
    "president", "senator", "governor", "mayor", "judge",
    "doctor", "professor", "reverend", "bishop", "cardinal",
    "mr", "mrs", "ms", "miss", "dr", "prof",
    "sir", "lord", "lady", "duke", "duchess",
    "king", "queen", "prince", "princess",
    "general", "colonel", "captain", "lieutenant",
    "chief", "director", "chairman", "ceo",
)


# ============================================================
# NEGATION CONTEXT
# ============================================================

NEGATOR_WORDS: frozenset[str] = frozenset({
    "not", "never", "no", "hardly", "barely", "scarcely",
    "isn't", "aren't", "wasn't", "weren't", "won't", "wouldn't",
    "can't", "couldn't", "shouldn't", "don't", "doesn't", "didn't",
    "haven't", "hasn't", "hadn't", "cannot", "without",
    "neither", "nor", "none", "nothing", "nowhere",
})

# Two-word entries match adjacent tokens
DIMINISHER_WORDS: frozenset[str] = frozenset({
    "slightly", "somewhat", "a bit", "a little",
    "kind of", "sort of", "rather", "fairly",
    "mildly", "marginally", "partially",
})

INTENSIFIER_WORDS: frozenset[str] = frozenset({
    "very", "extremely", "really", "quite", "so", "too",
    "incredibly", "absolutely", "completely", "totally",
    "utterly", "thoroughly", "highly", "deeply",
})
