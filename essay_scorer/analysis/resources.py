"""
Built-in linguistic resources for essay analysis: the misspelling dictionary
and the ordered grammar rule table.

Both tables are built once at import and exposed read-only.
"""

import re
from types import MappingProxyType
from typing import NamedTuple, Pattern, Tuple


# Misspelling -> correction
MISSPELLINGS = MappingProxyType({
    # Basic misspellings
    'teh': 'the',
    'recieve': 'receive',
    'occured': 'occurred',
    'seperate': 'separate',
    'definately': 'definitely',
    'managment': 'management',
    'enviroment': 'environment',
    'intresting': 'interesting',
    'necesary': 'necessary',
    'publically': 'publicly',
    'accomodate': 'accommodate',
    'begining': 'beginning',
    'beleive': 'believe',
    'calender': 'calendar',
    'cemetary': 'cemetery',
    'changable': 'changeable',
    'collegue': 'colleague',
    'concious': 'conscious',
    'embarass': 'embarrass',
    'existance': 'existence',
    'fourty': 'forty',
    'goverment': 'government',
    'harrass': 'harass',
    'independant': 'independent',
    'knowlege': 'knowledge',
    'maintainance': 'maintenance',
    'mispell': 'misspell',
    'noticable': 'noticeable',
    'occassion': 'occasion',
    'perseverence': 'perseverance',
    'priviledge': 'privilege',
    'recomend': 'recommend',
    'supercede': 'supersede',
    'tommorow': 'tomorrow',
    'untill': 'until',
    'wierd': 'weird',

    # Additional common errors
    'acheive': 'achieve',
    'adress': 'address',
    'arguement': 'argument',
    'buisness': 'business',
    'catagory': 'category',
    'commitee': 'committee',
    'completly': 'completely',
    'conscince': 'conscience',
    'desicion': 'decision',
    'difinition': 'definition',
    'explaination': 'explanation',
    'familar': 'familiar',
    'hieght': 'height',
    'immediatly': 'immediately',
    'judgement': 'judgment',
    'lenght': 'length',
    'mispelling': 'misspelling',
    'necessery': 'necessary',
    'occurance': 'occurrence',
    'posession': 'possession',
    'refering': 'referring',
    'sucessful': 'successful',
    'temperture': 'temperature',
    'unfortunatly': 'unfortunately',
    'vaccum': 'vacuum',
    'wether': 'whether',

    # Common word confusions, matched without context
    'loose': 'lose',
    'there': 'their',
    'affect': 'effect',
    'then': 'than',
    'alot': 'a lot',
    'everytime': 'every time',
    'inspite': 'in spite',
    'infront': 'in front',
    'alright': 'all right',

    # Professional/academic terms
    'analize': 'analyze',
    'caracteristic': 'characteristic',
    'experiance': 'experience',
    'independance': 'independence',
    'responsability': 'responsibility',
    'sucessfull': 'successful',
    'technic': 'technique',
    'therfor': 'therefore',
    'usefull': 'useful',
    'wonderfull': 'wonderful',
})


class GrammarRule(NamedTuple):
    """A compiled pattern paired with the correction shown to the writer."""
    name: str
    pattern: Pattern
    message: str


def _rule(name: str, pattern: str, message: str, ignore_case: bool = True) -> GrammarRule:
    flags = re.IGNORECASE if ignore_case else 0
    return GrammarRule(name, re.compile(pattern, flags), message)


# Order matters: errors are reported in rule order, and the improvement-area
# generator keys its tips off the first matching messages.
GRAMMAR_RULES: Tuple[GrammarRule, ...] = (
    # Articles (a/an)
    _rule('a_before_vowel_sound',
          r"\b(a)\s+(apple|orange|umbrella|hour|honest|honor|ant|elephant|idea|egg|ice|ocean|uncle|example|answer|exercise|office)\b",
          'Use "an" before words starting with vowel sounds'),
    _rule('an_before_consonant_sound',
          r"\b(an)\s+(book|car|house|dog|university|european|one|user|unique|uniform|unit|usual)\b",
          'Use "a" before words starting with consonant sounds'),

    # Its vs it's
    _rule('its_for_it_is',
          r"\bits\s+(going|coming|running|working|time|important|difficult|easy|been|a)\b",
          'Use "it\'s" (it is) instead of "its" (possessive)'),
    _rule('it_is_for_its',
          r"\bit's\s+(own|color|size|place|way|purpose|function|meaning)\b",
          'Use "its" (possessive) instead of "it\'s" (it is)'),

    # Your vs you're
    _rule('your_for_you_are',
          r"\byour\s+(going|coming|running|working|welcome|not|very|so|really|quite|always|never|still)\b",
          'Use "you\'re" (you are) instead of "your" (possessive)'),
    _rule('you_are_for_your',
          r"\byou're\s+(name|book|house|car|friend|family|job|work|skills|experience)\b",
          'Use "your" (possessive) instead of "you\'re" (you are)'),

    # There vs they're vs their
    _rule('there_for_they_are',
          r"\bthere\s+(going|coming|running|working|not|very|so|really|quite|always|never|still)\b",
          'Use "they\'re" (they are) instead of "there" (location)'),
    _rule('they_are_for_their',
          r"\bthey're\s+(house|car|book|name|family|friends|work|job|skills|way|place)\b",
          'Use "their" (possessive) instead of "they\'re" (they are)'),
    _rule('their_for_they_are',
          r"\btheir\s+(going|coming|running|working|not|very|so|really|quite|always|never|still)\b",
          'Use "they\'re" (they are) instead of "their" (possessive)'),

    # To vs too
    _rule('to_for_too',
          r"\bto\s+(busy|tired|excited|happy|much|many|late|early|fast|slow|good|bad|big|small|difficult|easy)\b",
          'Use "too" (excessively) instead of "to" (direction/infinitive)'),
    _rule('too_for_to',
          r"\btoo\s+(go|come|run|work|be|do|have|get|make|take|give|see|know|think|feel|look|find|tell|ask|try|help|start|stop)\b",
          'Use "to" (infinitive) instead of "too" (excessively)'),

    # Modal verbs with "of"
    _rule('should_of', r"\bshould\s+of\b", 'Use "should have" instead of "should of"'),
    _rule('could_of', r"\bcould\s+of\b", 'Use "could have" instead of "could of"'),
    _rule('would_of', r"\bwould\s+of\b", 'Use "would have" instead of "would of"'),
    _rule('might_of', r"\bmight\s+of\b", 'Use "might have" instead of "might of"'),
    _rule('must_of', r"\bmust\s+of\b", 'Use "must have" instead of "must of"'),

    # Common spelling/grammar errors
    _rule('alot', r"\balot\b", 'Use "a lot" (two words) instead of "alot"'),
    _rule('lowercase_i', r"\bi\s+(?![A-Z])", 'Capitalize "I" when used as a pronoun', ignore_case=False),

    # Subject-verb agreement
    _rule('singular_subject_plural_verb',
          r"\b(he|she|it)\s+(are|were)\b",
          'Use "is" or "was" with singular subjects (he/she/it)'),
    _rule('plural_subject_singular_verb',
          r"\b(they|we|you)\s+(is|was)\b",
          'Use "are" or "were" with plural subjects (they/we/you)'),
    _rule('there_is_plural_noun',
          r"\bthere\s+(is|was)\s+\w*\s*(books|cars|people|things|students|problems|questions|answers|ideas|ways|times)\b",
          'Use "there are" or "there were" with plural nouns'),
    _rule('there_are_singular_noun',
          r"\bthere\s+(are|were)\s+\w*\s*(book|car|person|thing|student|problem|question|answer|idea|way|time)\b",
          'Use "there is" or "there was" with singular nouns'),

    # Sentence structure
    _rule('lowercase_after_period', r"\.\s*[a-z]",
          'Capitalize the first letter after a period', ignore_case=False),
    _rule('dependent_clause',
          r"\b(because|although|since|while|if|when|before|after)\s+[^.!?]*\.",
          'This sentence seems incomplete - dependent clauses need an independent clause'),

    # Word confusions
    _rule('then_for_than',
          r"\bthen\s+(i|we|you|they|he|she|it)\s+(am|are|is|was|were|will|would|can|could|should|might)\b",
          'Use "than" for comparisons instead of "then" (time sequence)'),
    _rule('affect_with_article',
          r"\baffect\b.*\b(the|a|an)\s+\w+",
          'Consider "effect" (noun) instead of "affect" (verb) when used with articles'),
    _rule('lose_verb',
          r"\blose\s+(weight|game|match|job|money|time|way|focus|control|patience|temper|hope)\b",
          'Use "lose" (verb) - this usage is correct'),
    _rule('loose_for_lose',
          r"\bloose\s+(weight|game|match|job|money|time|way|focus|control|patience|temper|hope)\b",
          'Use "lose" (verb) instead of "loose" (adjective meaning not tight)'),

    # Run-on sentences (doubled conjunctions)
    _rule('doubled_conjunction',
          r"\b(and|but|so|or)\s+(and|but|so|or)",
          'Consider breaking this into separate sentences to avoid run-on sentences'),

    # Missing articles
    _rule('missing_article',
          r"\b(go to|went to|at|in|on)\s+(school|work|store|hospital|bank|library|university|college|office|home)\b",
          'Consider adding an article (a/an/the) before the noun'),

    # Apostrophes
    _rule('plural_possessive_apostrophe', r"\b(\w+)s'\s+(\w+)",
          'Check apostrophe placement for possessive nouns', ignore_case=False),
)

# Structural heuristics
CAPITALIZE_SENTENCE_MESSAGE = "Capitalize the first letter of each sentence"
RUN_ON_MESSAGE = "Consider breaking this long sentence into smaller ones"
REPEATED_WORD_MESSAGE = "Remove repeated word: {word}"

RUN_ON_WORD_LIMIT = 25
REPEATED_WORD_MIN_LENGTH = 3
