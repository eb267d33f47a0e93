"""
Quiz question banks, quick and deep.

Weight keys per system:

- attitudinal: V, L, E, F (quick: one win per pairwise question)
- enneagram: "1".."9" for types, sp/so/sx for instincts
- mbti: quick uses signed axes EI/SN/TF/JP (positive = E/S/T/J);
  deep uses cognitive functions Ti..Ne
- socionics: quick uses quadras; deep adds clubs and ie_* information elements
- instincts: SUR/INT/PUR for the center stage, realm codes for the realm stage

Realm questions are not part of the base list; they are picked once the
center is known (`realm_questions_for`).
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import InvalidInputError
from .types import INSTINCT_CENTERS, QUIZ_MODES, SYSTEM_IDS, QuizOption, QuizQuestion

OptionSpec = Tuple[str, Mapping[str, int]]

_REALM_ID_RE = re.compile(r"^(deep-)?inst-(sur|int|pur)-")


def _q(qid: str, system: str, prompt: str, *options: OptionSpec) -> QuizQuestion:
    return QuizQuestion(
        id=qid,
        system=system,
        prompt=prompt,
        options=tuple(QuizOption(label=label, weights=dict(weights)) for label, weights in options),
    )


# --- Attitudinal Psyche ------------------------------------------------------

QUICK_AP_QUESTIONS: Tuple[QuizQuestion, ...] = (
    _q(
        "ap-1", "attitudinal",
        "At a crossroads, one road climbs to an empty throne and the other descends to a library of every secret. Which do you walk?",
        ("The throne. The world bends to a will that refuses to bend", {"V": 1}),
        ("The library. Understanding outlasts any crown", {"L": 1}),
    ),
    _q(
        "ap-2", "attitudinal",
        "A fading god grants a final boon. Which do you accept?",
        ("A will no fate can break", {"V": 1}),
        ("A heart deep enough to move a mountain", {"E": 1}),
    ),
    _q(
        "ap-3", "attitudinal",
        "In a sunken forge you may claim a single relic. Which one?",
        ("A banner that makes others follow without question", {"V": 1}),
        ("A belt that keeps the body tireless and whole", {"F": 1}),
    ),
    _q(
        "ap-4", "attitudinal",
        "Two companions quarrel. One cites the facts, the other the hurt behind them. Whose side feels right?",
        ("The facts. Reason settles what feelings inflame", {"L": 1}),
        ("The hurt. A quarrel is never really about the facts", {"E": 1}),
    ),
    _q(
        "ap-5", "attitudinal",
        "A healer can bless either your mind or your body, never both. Which do you choose?",
        ("The mind. Clear thought is the armor no blade pierces", {"L": 1}),
        ("The body. Knowledge means little if the flesh gives out", {"F": 1}),
    ),
    _q(
        "ap-6", "attitudinal",
        "After a long campaign you finally rest. What restores you?",
        ("Long talks by the fire about everything we lived through", {"E": 1}),
        ("Deep sleep, warm food and a body allowed to heal", {"F": 1}),
    ),
)

DEEP_AP_QUESTIONS: Tuple[QuizQuestion, ...] = (
    # Pairwise
    _q(
        "deep-ap-1", "attitudinal",
        "The war-band argues over what its leader needs most: certainty that carries everyone forward, or clarity that is never fooled. Where do you stand?",
        ("Certainty. Hesitation loses the moment", {"V": 1}),
        ("Clarity. A confident leader can still march us off a cliff", {"L": 1}),
    ),
    _q(
        "deep-ap-2", "attitudinal",
        "A curse will take either your force of will or your emotional depth. Which do you keep?",
        ("My will. I can live without feeling everything, not without fighting for what I want", {"V": 1}),
        ("My depth. A life without real feeling is hollow", {"E": 1}),
    ),
    _q(
        "deep-ap-3", "attitudinal",
        "Behind a gate that opens once lie the Crown of Dominion and the Heartstone of Endurance. Which do you claim?",
        ("The Crown. Let them follow", {"V": 1}),
        ("The Heartstone. My body never fails me again", {"F": 1}),
    ),
    _q(
        "deep-ap-4", "attitudinal",
        "You mediate between a companion who reasons and one who feels. Who do you believe?",
        ("The reasoner. Clear thinking cuts through confusion", {"L": 1}),
        ("The empath. Logic without heart misses what matters", {"E": 1}),
    ),
    _q(
        "deep-ap-5", "attitudinal",
        "Perfect memory and immunity to illusion, or tireless endurance and immunity to poison?",
        ("The mind. Some threats no armor can stop", {"L": 1}),
        ("The body. Everything else rests on it", {"F": 1}),
    ),
    _q(
        "deep-ap-6", "attitudinal",
        "A quiet week between battles. What pulls at you?",
        ("Sitting with companions and making sense of what we felt", {"E": 1}),
        ("Sleeping, stretching and eating until I am whole again", {"F": 1}),
    ),
    # Position attitudes
    _q(
        "deep-ap-7", "attitudinal",
        "A fork with no map, and the party looks to you. What happens next?",
        ("I pick a path and go. A wrong turn beats standing still", {"V": 2}),
        ("We talk it through together. Two minds see more than one", {"L": 1, "E": 1}),
        ("I rest my legs while the others argue", {"F": 1}),
    ),
    _q(
        "deep-ap-8", "attitudinal",
        "A scholar publicly corrects a claim you made. How does it land?",
        ("Good. I would rather be corrected than wrong", {"L": 2}),
        ("I hear them out, then decide for myself", {"V": 1}),
        ("It stings. Let them chase the details while I tend to real things", {"L": -1, "F": 1}),
    ),
    _q(
        "deep-ap-9", "attitudinal",
        "A companion weeps openly at the campfire. What do you do?",
        ("Sit with them. Feelings like that deserve company", {"E": 2}),
        ("Help them name it, then help them act on it", {"E": 1, "V": 1}),
        ("Give them space and think about the cause", {"E": -1, "L": 1}),
    ),
    _q(
        "deep-ap-10", "attitudinal",
        "Rations are short and the march is long. What concerns you most?",
        ("My body. Hunger and cold are the real enemy", {"F": 2}),
        ("The group. Shared hardship either binds or breaks us", {"F": 1, "E": 1}),
        ("The plan. A sharper route ends the march sooner", {"V": 1, "L": 1}),
    ),
    _q(
        "deep-ap-11", "attitudinal",
        "Which compliment would you treasure most?",
        ("Nothing could turn you from your course", {"V": 2}),
        ("You always see what others miss", {"L": 2}),
        ("You make every place you enter feel alive", {"E": 1, "F": 1}),
    ),
    _q(
        "deep-ap-12", "attitudinal",
        "At the end of the road, what do you want to be remembered for?",
        ("What I decided", {"V": 1}),
        ("What I understood", {"L": 1}),
        ("What I felt and shared", {"E": 1}),
        ("How fully I lived", {"F": 1}),
    ),
)


# --- Enneagram ---------------------------------------------------------------

QUICK_ENNEAGRAM_QUESTIONS: Tuple[QuizQuestion, ...] = (
    _q(
        "enn-1", "enneagram",
        "A tyrant who burned a village sits unpunished in his hall. What rises in you first?",
        ("Cold anger. Someone must answer for this", {"1": 3, "8": 1}),
        ("Grief. Someone must tend the survivors", {"2": 3, "9": 1}),
        ("Calculation. How can this moment be used?", {"3": 3, "8": 1}),
        ("A hollow ache. The world is broken", {"4": 3, "5": 1}),
    ),
    _q(
        "enn-2", "enneagram",
        "You find a sealed vault nobody else knows about. What now?",
        ("Study it alone before telling anyone", {"5": 3, "4": 1}),
        ("Check every exit and trap before going further", {"6": 3, "5": 1}),
        ("Go in. Forbidden places make the best stories", {"7": 3, "3": 1}),
        ("Claim it. It is mine now", {"8": 3, "1": 1}),
    ),
    _q(
        "enn-3", "enneagram",
        "Doom closes in on the party. Which role do you fall into?",
        ("Holding the line so nobody falls", {"2": 3, "6": 1}),
        ("Finding the way out nobody else saw", {"7": 3, "9": 1}),
        ("Keeping everyone calm and together", {"9": 3, "2": 1}),
        ("Taking command and giving orders", {"8": 3, "3": 1}),
    ),
    _q(
        "enn-4", "enneagram",
        "What do people say about you when you leave the room?",
        ("They always do the right thing", {"1": 3, "6": 1}),
        ("They would give anyone the cloak off their back", {"2": 3, "7": 1}),
        ("They get things done and look good doing it", {"3": 3, "7": 1}),
        ("There is nobody else quite like them", {"4": 3, "9": 1}),
    ),
    _q(
        "enn-5", "enneagram",
        "A stranger asks to join the party. What do you need to know first?",
        ("Whether they can be trusted", {"6": 3, "1": 1}),
        ("What they know that we do not", {"5": 3, "7": 1}),
        ("Whether they will keep up", {"3": 3, "8": 1}),
        ("Whether they will fit in without friction", {"9": 3, "6": 1}),
    ),
    _q(
        "enn-6", "enneagram",
        "Which failure would haunt you longest?",
        ("Acting wrongly when I knew better", {"1": 3, "4": 1}),
        ("Being of no use to the people I love", {"2": 3, "6": 1}),
        ("Being seen as ordinary", {"4": 3, "3": 1}),
        ("Being caught unprepared", {"5": 3, "6": 1}),
    ),
    _q(
        "enn-7", "enneagram",
        "The party wins a fortune. What do you do with your share?",
        ("Spend it on the next adventure", {"7": 3, "2": 1}),
        ("Buy things that mark my success", {"3": 3, "4": 1}),
        ("Hoard it for the lean times", {"5": 3, "6": 1}),
        ("Buy land and peace and quiet", {"9": 3, "5": 1}),
    ),
    _q(
        "enn-8", "enneagram",
        "Someone insults your companion in a tavern. What do you do?",
        ("Step in front of them. Nobody talks to mine like that", {"8": 3, "2": 1}),
        ("Correct the insult point by point", {"1": 3, "5": 1}),
        ("Laugh it off and buy the next round", {"7": 3, "9": 1}),
        ("Quietly check whether my friend is all right", {"2": 3, "4": 1}),
    ),
    _q(
        "enn-9", "enneagram",
        "What does a perfect day on the road look like?",
        ("Everything done properly and in order", {"1": 3, "3": 1}),
        ("Beauty that cuts to the bone", {"4": 3, "7": 1}),
        ("No conflict. Everyone content", {"9": 3, "1": 1}),
        ("A full ledger of tasks finished", {"3": 3, "1": 1}),
    ),
    _q(
        "enn-10", "enneagram",
        "An order from above makes no sense. How do you respond?",
        ("Question it until it does", {"6": 3, "8": 1}),
        ("Ignore it and do what is right", {"1": 3, "8": 1}),
        ("Go along with it. Not worth the fight", {"9": 3, "6": 1}),
        ("Work out the reasoning on my own time", {"5": 3, "1": 1}),
    ),
    _q(
        "enn-11", "enneagram",
        "In a dream you meet your truest self. What is it doing?",
        ("Standing alone on a cliff, unafraid", {"8": 3, "4": 1}),
        ("Laughing somewhere bright and loud", {"7": 3, "2": 1}),
        ("Mapping the stars by candlelight", {"5": 3, "9": 1}),
        ("Being crowned before a cheering crowd", {"3": 3, "2": 1}),
    ),
    _q(
        "enn-12", "enneagram",
        "The ally who betrayed you returns begging forgiveness. What do you feel?",
        ("Suspicion. Once a traitor", {"6": 3, "8": 1}),
        ("Pity. They must have been desperate", {"2": 3, "9": 1}),
        ("A wound that reopens", {"4": 3, "6": 1}),
        ("Indifference. I moved on long ago", {"9": 3, "5": 1}),
    ),
    # Instincts
    _q(
        "enn-13", "enneagram",
        "You make camp in hostile land. What do you see to first?",
        ("Shelter, water and a safe place to sleep", {"sp": 3}),
        ("Who is on watch and whether everyone is in good spirits", {"so": 3}),
        ("The one companion I would die for", {"sx": 3}),
    ),
    _q(
        "enn-14", "enneagram",
        "What makes a life feel full?",
        ("Security and comfort I built myself", {"sp": 3}),
        ("A place in a community that needs me", {"so": 3}),
        ("One bond so intense it changes me", {"sx": 3}),
    ),
    _q(
        "enn-15", "enneagram",
        "A rival appears at court. What worries you most?",
        ("That they will take what keeps me safe", {"sp": 3}),
        ("That they will take my standing", {"so": 3}),
        ("That they will take the person I love", {"sx": 3}),
    ),
)

DEEP_ENNEAGRAM_QUESTIONS: Tuple[QuizQuestion, ...] = (
    _q(
        "deep-enn-1", "enneagram",
        "The realm is fraying: crops fail and the old laws are ignored. What is your gut response?",
        ("Restore the law, even if it makes me hated", {"1": 3, "6": 1}),
        ("Feed whoever is hungriest, law or not", {"2": 3, "9": 1}),
        ("Seize the chaos and rise with it", {"8": 3, "3": 1}),
        ("Withdraw and study where it all went wrong", {"5": 3, "4": 1}),
    ),
    _q(
        "deep-enn-2", "enneagram",
        "A bard writes a song about you. Which verse would you secretly want?",
        ("The one about my unmatched deeds", {"3": 3, "7": 1}),
        ("The one about my sorrow no one understood", {"4": 3, "2": 1}),
        ("The one about my loyalty through every storm", {"6": 3, "2": 1}),
        ("The one about how I kept the peace", {"9": 3, "1": 1}),
    ),
    _q(
        "deep-enn-3", "enneagram",
        "You are given command of a fortress. What do you change first?",
        ("The rules. Sloppy rules get people killed", {"1": 3, "5": 1}),
        ("The defenses. Every weakness, patched", {"6": 3, "8": 1}),
        ("The reputation. Our banner should be feared", {"3": 3, "8": 1}),
        ("Nothing yet. I watch before I touch", {"5": 3, "9": 1}),
    ),
    _q(
        "deep-enn-4", "enneagram",
        "When you are exhausted and alone, what does the voice in your head say?",
        ("You should have done it better", {"1": 3, "4": 1}),
        ("Nobody would notice if you vanished", {"4": 3, "9": 1}),
        ("Nobody thanks you for all you give", {"2": 3, "8": 1}),
        ("You are missing something somewhere else", {"7": 3, "6": 1}),
    ),
    _q(
        "deep-enn-5", "enneagram",
        "An ancient spirit offers to show you one truth. Which do you ask for?",
        ("How the world truly works", {"5": 3, "1": 1}),
        ("Who will betray me", {"6": 3, "5": 1}),
        ("What lies beyond the next horizon", {"7": 3, "4": 1}),
        ("How to make the people I love need me less", {"2": 3, "9": 1}),
    ),
    _q(
        "deep-enn-6", "enneagram",
        "A fight breaks out between two of your friends. What do you do?",
        ("Step in hard. It ends now", {"8": 3, "1": 1}),
        ("Smooth it over before it gets worse", {"9": 3, "2": 1}),
        ("Make a joke and move the party on", {"7": 3, "3": 1}),
        ("Stay out of it and watch", {"5": 3, "6": 1}),
    ),
    _q(
        "deep-enn-7", "enneagram",
        "The guild offers a promotion that would take you far from home. What decides it?",
        ("Whether it is the right step up", {"3": 3, "1": 1}),
        ("Whether the people I leave will be all right", {"2": 3, "6": 1}),
        ("Whether it feels true to who I am", {"4": 3, "5": 1}),
        ("Whether I will have more control", {"8": 3, "3": 1}),
    ),
    _q(
        "deep-enn-8", "enneagram",
        "What is the most dangerous thing a companion could do?",
        ("Lie to me", {"1": 3, "6": 1}),
        ("Leave without a word", {"6": 3, "4": 1}),
        ("Try to control me", {"8": 3, "7": 1}),
        ("Bore me", {"7": 3, "8": 1}),
    ),
    _q(
        "deep-enn-9", "enneagram",
        "You stand before a mirror that shows your worth. What do you fear it shows?",
        ("A fraud behind the achievements", {"3": 3, "6": 1}),
        ("Someone ordinary", {"4": 3, "3": 1}),
        ("Someone who takes up too much space", {"9": 3, "5": 1}),
        ("Someone weak", {"8": 3, "6": 1}),
    ),
    _q(
        "deep-enn-10", "enneagram",
        "An old mentor dies and leaves you one thing. Which gift would mean most?",
        ("Their journals, full of everything they learned", {"5": 3, "4": 1}),
        ("Their sword, still sharp", {"8": 3, "1": 1}),
        ("Their farewell letter, written only for me", {"2": 3, "4": 1}),
        ("Their map of places they never reached", {"7": 3, "5": 1}),
    ),
    _q(
        "deep-enn-11", "enneagram",
        "Plans collapse on the eve of battle. What is your first move?",
        ("Find what went wrong and fix it properly", {"1": 3, "3": 1}),
        ("Make sure nobody panics", {"9": 3, "6": 1}),
        ("Draft three new plans by dawn", {"3": 3, "7": 1}),
        ("Imagine every way the next one fails", {"6": 3, "5": 1}),
    ),
    _q(
        "deep-enn-12", "enneagram",
        "What would paradise feel like?",
        ("A world that finally makes sense", {"1": 3, "5": 1}),
        ("A hall where everyone I love is safe", {"2": 3, "6": 1}),
        ("A place where nothing is demanded of me", {"9": 3, "7": 1}),
        ("Endless roads and endless feasts", {"7": 3, "9": 1}),
    ),
    _q(
        "deep-enn-13", "enneagram",
        "A desert with one well. What decides who drinks first?",
        ("Whoever can survive longest without it drinks last, starting with me", {"sp": 3}),
        ("We decide together, fairly", {"so": 3}),
        ("The one I love drinks first, always", {"sx": 3}),
    ),
    _q(
        "deep-enn-14", "enneagram",
        "Where does your attention drift in a crowded hall?",
        ("To the exits, the food and my own comfort", {"sp": 3}),
        ("To who holds power and how the room is arranged", {"so": 3}),
        ("To the one person whose eyes meet mine", {"sx": 3}),
    ),
    _q(
        "deep-enn-15", "enneagram",
        "Which loss would hollow you out?",
        ("My home and everything I put into it", {"sp": 3}),
        ("My name among my people", {"so": 3}),
        ("The one person who truly sees me", {"sx": 3}),
    ),
    _q(
        "deep-enn-16", "enneagram",
        "A witch offers a charm. Which do you take?",
        ("Never go hungry or cold again", {"sp": 3}),
        ("Always be welcome wherever you go", {"so": 3}),
        ("Make one person burn for you forever", {"sx": 3}),
    ),
)


# --- MBTI --------------------------------------------------------------------

QUICK_MBTI_QUESTIONS: Tuple[QuizQuestion, ...] = (
    # E/I
    _q(
        "mbti-1", "mbti",
        "The party camps in a vast ruin. How do you recharge?",
        ("By the fire with everyone. Talk fills me back up", {"EI": 2}),
        ("Alone at the edge of camp. I need the quiet", {"EI": -2}),
    ),
    _q(
        "mbti-2", "mbti",
        "A new ally joins. How do you size them up?",
        ("Talk with them. I learn by engaging", {"EI": 1}),
        ("Watch them. Actions say more than words", {"EI": -1}),
    ),
    _q(
        "mbti-3", "mbti",
        "A war council of a hundred voices. Where are you?",
        ("In the thick of the debate", {"EI": 2}),
        ("Listening until it counts", {"EI": -2}),
    ),
    # S/N
    _q(
        "mbti-4", "mbti",
        "You enter a cathedral covered in strange carvings. What grabs you?",
        ("The details: stonework, wear, what the tools were", {"SN": 2}),
        ("The meaning: what the carvings were trying to say", {"SN": -2}),
    ),
    _q(
        "mbti-5", "mbti",
        "How do you prefer to learn a new weapon?",
        ("Drill the forms until my hands know them", {"SN": 1}),
        ("Grasp the principle, then improvise", {"SN": -1}),
    ),
    _q(
        "mbti-6", "mbti",
        "A scout reports back. What do you want from them?",
        ("Exactly what they saw, nothing more", {"SN": 2}),
        ("What they think it means", {"SN": -2}),
    ),
    # T/F
    _q(
        "mbti-7", "mbti",
        "A companion broke an oath to save a child. How do you judge it?",
        ("An oath is an oath. There must be consequences", {"TF": 2}),
        ("They did the right thing. The oath mattered less", {"TF": -2}),
    ),
    _q(
        "mbti-8", "mbti",
        "The party must choose a new leader. What matters most?",
        ("Competence", {"TF": 1}),
        ("Whether people trust them", {"TF": -1}),
    ),
    _q(
        "mbti-9", "mbti",
        "A plan you love is criticized. What persuades you to drop it?",
        ("A flaw in the logic", {"TF": 2}),
        ("Seeing that it would hurt someone", {"TF": -2}),
    ),
    # J/P
    _q(
        "mbti-10", "mbti",
        "A long journey begins tomorrow. How do you prepare?",
        ("Route, supplies and schedule, all settled tonight", {"JP": 2}),
        ("Pack the basics and figure out the rest on the way", {"JP": -2}),
    ),
    _q(
        "mbti-11", "mbti",
        "Halfway through a quest, a tempting detour appears.",
        ("Stay the course. Finish what we started", {"JP": 1}),
        ("Take it. The quest will keep", {"JP": -1}),
    ),
    _q(
        "mbti-12", "mbti",
        "How do you feel about an unfinished decision?",
        ("Restless until it is made", {"JP": 2}),
        ("Comfortable. Options are freedom", {"JP": -2}),
    ),
)

DEEP_MBTI_QUESTIONS: Tuple[QuizQuestion, ...] = (
    _q(
        "deep-mbti-1", "mbti",
        "A strange mechanism blocks the way. How do you approach it?",
        ("Work out the principle behind it on my own", {"Ti": 3}),
        ("Find the fastest way to make it open", {"Te": 3, "Si": 1}),
        ("Ask what the builders wanted us to feel", {"Fe": 3, "Ni": 1}),
        ("Try a dozen odd ideas to see what sticks", {"Ne": 3, "Ti": 1}),
    ),
    _q(
        "deep-mbti-2", "mbti",
        "What do you trust most when the path is unclear?",
        ("A hunch about where this is all going", {"Ni": 3, "Te": 1}),
        ("What worked the last time", {"Si": 3, "Fi": 1}),
        ("What I can see and touch right now", {"Se": 3, "Ti": 1}),
        ("What I know is right, deep down", {"Fi": 3}),
    ),
    _q(
        "deep-mbti-3", "mbti",
        "The quartermaster's books are a mess. What bothers you?",
        ("The categories make no sense", {"Ti": 3, "Ni": 1}),
        ("Nothing gets delivered on time", {"Te": 3, "Se": 1}),
        ("The old way worked and nobody follows it", {"Si": 3}),
        ("Everyone is tense and snapping at each other", {"Fe": 3, "Fi": 1}),
    ),
    _q(
        "deep-mbti-4", "mbti",
        "How do you win an argument you care about?",
        ("Show a contradiction they cannot escape", {"Ti": 3}),
        ("Lay out the evidence and the results", {"Te": 3, "Si": 1}),
        ("Appeal to what we all value together", {"Fe": 3}),
        ("Refuse to budge on what I believe", {"Fi": 3, "Ni": 1}),
    ),
    _q(
        "deep-mbti-5", "mbti",
        "An ambush. What are you doing in the first second?",
        ("Already moving, already striking", {"Se": 3, "Te": 1}),
        ("Seeing how this ends before it starts", {"Ni": 3, "Ti": 1}),
        ("Falling back on drilled routines", {"Si": 3, "Te": 1}),
        ("Spotting three unexpected ways out", {"Ne": 3, "Se": 1}),
    ),
    _q(
        "deep-mbti-6", "mbti",
        "What kind of story pulls you in?",
        ("One that questions everything and follows every tangent", {"Ne": 3, "Fi": 1}),
        ("One with a single hidden meaning revealed at the end", {"Ni": 3}),
        ("One full of vivid action and sensation", {"Se": 3}),
        ("One about a hero who stays true to themselves", {"Fi": 3, "Ne": 1}),
    ),
    _q(
        "deep-mbti-7", "mbti",
        "How do you show someone you care?",
        ("Remember every small thing they like", {"Si": 3, "Fe": 1}),
        ("Make sure the group includes them", {"Fe": 3, "Si": 1}),
        ("Solve the problem that weighs on them", {"Te": 3}),
        ("Accept them exactly as they are", {"Fi": 3, "Se": 1}),
    ),
    _q(
        "deep-mbti-8", "mbti",
        "You are asked to design the party's training. What do you emphasize?",
        ("Understanding why each technique works", {"Ti": 3, "Ne": 1}),
        ("Measurable progress each week", {"Te": 3, "Ni": 1}),
        ("Consistent daily routine", {"Si": 3, "Te": 1}),
        ("Sparring. Real pressure, real reflexes", {"Se": 3, "Fi": 1}),
    ),
    _q(
        "deep-mbti-9", "mbti",
        "A prophecy mentions you. What do you do with it?",
        ("Turn it over until I see the shape of what is coming", {"Ni": 3, "Fe": 1}),
        ("Imagine all the ways it could be read", {"Ne": 3, "Ni": 1}),
        ("Ignore it and deal with today", {"Se": 3, "Ti": 1}),
        ("Check it against older records", {"Si": 3, "Ti": 1}),
    ),
    _q(
        "deep-mbti-10", "mbti",
        "What irritates you most in a companion?",
        ("Sloppy reasoning", {"Ti": 3}),
        ("Inefficiency", {"Te": 3, "Se": 1}),
        ("Hypocrisy", {"Fi": 3}),
        ("Coldness toward others", {"Fe": 3, "Ne": 1}),
    ),
    _q(
        "deep-mbti-11", "mbti",
        "You have a free afternoon in a new city. How do you spend it?",
        ("Wandering wherever curiosity leads", {"Ne": 3, "Se": 1}),
        ("Finding the best food and sights", {"Se": 3, "Fe": 1}),
        ("Revisiting a familiar tavern", {"Si": 3}),
        ("Thinking alone on a rooftop", {"Ni": 3, "Fi": 1}),
    ),
    _q(
        "deep-mbti-12", "mbti",
        "A bitter moral dispute splits the camp. What guides you?",
        ("My own conscience, whatever others say", {"Fi": 3, "Si": 1}),
        ("What keeps the group whole", {"Fe": 3}),
        ("Which argument holds together", {"Ti": 3, "Fe": 1}),
        ("Which option actually gets us home", {"Te": 3}),
    ),
    _q(
        "deep-mbti-13", "mbti",
        "How do you handle a sudden change of plans?",
        ("Love it. New possibilities", {"Ne": 3, "Ti": 1}),
        ("Adapt on the spot", {"Se": 3, "Te": 1}),
        ("Feel uneasy until a new routine forms", {"Si": 3, "Fi": 1}),
        ("Already saw it coming", {"Ni": 3}),
    ),
    _q(
        "deep-mbti-14", "mbti",
        "What do you bring to the war council?",
        ("A clear chain of command and a timeline", {"Te": 3, "Ni": 1}),
        ("A sense of where the enemy is heading", {"Ni": 3, "Te": 1}),
        ("Harmony between rival captains", {"Fe": 3, "Si": 1}),
        ("A strange idea nobody else considered", {"Ne": 3, "Fe": 1}),
    ),
    _q(
        "deep-mbti-15", "mbti",
        "What do you carry that you would never trade?",
        ("A keepsake from home", {"Si": 3, "Fe": 1}),
        ("A vow I made to myself", {"Fi": 3, "Ni": 1}),
        ("A blade that has never failed me", {"Se": 3}),
        ("A notebook of my own theories", {"Ti": 3, "Ne": 1}),
    ),
    _q(
        "deep-mbti-16", "mbti",
        "What kind of leader would you be?",
        ("Decisive and effective", {"Te": 3, "Se": 1}),
        ("Warm and unifying", {"Fe": 3, "Ni": 1}),
        ("Visionary and quiet", {"Ni": 3, "Fe": 1}),
        ("Inventive and unpredictable", {"Ne": 3, "Fi": 1}),
    ),
)


# --- Socionics ---------------------------------------------------------------

QUICK_SOCIONICS_QUESTIONS: Tuple[QuizQuestion, ...] = (
    _q(
        "soc-1", "socionics",
        "What kind of fellowship do you want in a war-band?",
        ("Warmth and shared curiosity", {"Alpha": 3}),
        ("Intensity and a clear command", {"Beta": 3}),
        ("Competence and ambition", {"Gamma": 3}),
        ("Quiet reliability without drama", {"Delta": 3}),
    ),
    _q(
        "soc-2", "socionics",
        "A dispute divides the camp. Which approach fits you?",
        ("Debate it openly. Truth comes from free argument", {"Alpha": 3}),
        ("Pick a vision and lead. Unity comes from conviction", {"Beta": 3}),
        ("Judge by outcomes. Results prove who was right", {"Gamma": 3}),
        ("Find common ground. No idea is worth the group", {"Delta": 3}),
    ),
    _q(
        "soc-3", "socionics",
        "The realm grants you one boon. Which do you claim?",
        ("A salon of endless ideas", {"Alpha": 3}),
        ("A cause that demands everything", {"Beta": 3}),
        ("A venture of my own", {"Gamma": 3}),
        ("A peaceful homestead and a craft", {"Delta": 3}),
    ),
    _q(
        "soc-4", "socionics",
        "Conflict breaks out in the party. What is your instinct?",
        ("Talk it through with everyone present", {"Alpha": 3}),
        ("Someone decides and the rest follow", {"Beta": 3}),
        ("Let each person handle their own business", {"Gamma": 3}),
        ("Mediate quietly and find the middle", {"Delta": 3}),
    ),
)

DEEP_SOCIONICS_QUESTIONS: Tuple[QuizQuestion, ...] = (
    # Information elements
    _q(
        "deep-soc-1", "socionics",
        "Two guards block a gate. How do you get through?",
        ("Push past. They will move", {"ie_Se": 3}),
        ("Charm them until they want to help", {"ie_Fe": 3, "ie_Se": 1}),
        ("Wait for the shift change I already foresaw", {"ie_Ni": 3, "ie_Ti": 1}),
        ("Find the side door nobody uses", {"ie_Si": 2, "ie_Ne": 1}),
    ),
    _q(
        "deep-soc-2", "socionics",
        "What do you notice first when you enter a home?",
        ("Whether it is comfortable and well kept", {"ie_Si": 3}),
        ("The mood of the people inside", {"ie_Fe": 3}),
        ("Who holds power here", {"ie_Se": 2, "ie_Te": 1}),
        ("How the people feel about each other", {"ie_Fi": 3}),
    ),
    _q(
        "deep-soc-3", "socionics",
        "A long siege stretches on. What keeps you steady?",
        ("Trust that time will turn in our favor", {"ie_Ni": 3}),
        ("Small comforts: warm food, a good bed", {"ie_Si": 3, "ie_Fi": 1}),
        ("Keeping morale high", {"ie_Fe": 3, "ie_Si": 1}),
        ("Pressing the enemy wherever they are weak", {"ie_Se": 3, "ie_Fi": 1}),
    ),
    _q(
        "deep-soc-4", "socionics",
        "Which companion would you choose for a year on the road?",
        ("One whose loyalty never wavers", {"ie_Fi": 3, "ie_Ni": 1}),
        ("One who lights up every tavern", {"ie_Fe": 3, "ie_Ne": 1}),
        ("One who sees what is coming", {"ie_Ni": 3, "ie_Te": 1}),
        ("One who keeps us fed and healthy", {"ie_Si": 3, "ie_Te": 1}),
    ),
    _q(
        "deep-soc-5", "socionics",
        "What makes a rival dangerous?",
        ("Raw force and nerve", {"ie_Se": 3}),
        ("Patience and foresight", {"ie_Ni": 3, "ie_Ti": 1}),
        ("The loyalty of their people", {"ie_Fi": 3, "ie_Si": 1}),
        ("The crowd on their side", {"ie_Fe": 3, "ie_Se": 1}),
    ),
    _q(
        "deep-soc-6", "socionics",
        "How do you know a place is safe?",
        ("My body relaxes", {"ie_Si": 3, "ie_Ne": 1}),
        ("Nobody here would dare test me", {"ie_Se": 2, "ie_Te": 1}),
        ("The people here are decent", {"ie_Fi": 3}),
        ("Nothing in the pattern feels off", {"ie_Ni": 2, "ie_Ne": 1}),
    ),
    _q(
        "deep-soc-7", "socionics",
        "A festival fills the square. Where are you?",
        ("Leading the songs", {"ie_Fe": 3}),
        ("Pushing to the front", {"ie_Se": 2, "ie_Te": 1}),
        ("At a quiet table with old friends", {"ie_Fi": 3, "ie_Si": 1}),
        ("On a rooftop, watching the whole thing", {"ie_Ni": 2, "ie_Ti": 1}),
    ),
    _q(
        "deep-soc-8", "socionics",
        "What would you protect at any cost?",
        ("My territory", {"ie_Se": 2, "ie_Te": 1}),
        ("My health and peace", {"ie_Si": 3, "ie_Te": 1}),
        ("My bonds", {"ie_Fi": 3}),
        ("The spirit of the group", {"ie_Fe": 2, "ie_Ne": 1}),
    ),
    # Quadras
    _q(
        "deep-soc-9", "socionics",
        "What should a war-band feel like from the inside?",
        ("A lively salon of jokes and theories", {"Alpha": 3}),
        ("A sworn brotherhood under one banner", {"Beta": 3}),
        ("A company of professionals chasing results", {"Gamma": 3}),
        ("A family that looks after its own", {"Delta": 3}),
    ),
    _q(
        "deep-soc-10", "socionics",
        "What do you want your work to leave behind?",
        ("New ideas for others to play with", {"Alpha": 3}),
        ("A victory for a cause", {"Beta": 3}),
        ("Wealth and independence", {"Gamma": 3}),
        ("Something useful that lasts", {"Delta": 3}),
    ),
    _q(
        "deep-soc-11", "socionics",
        "How should power work in a group?",
        ("Loosely. Nobody needs to be in charge", {"Alpha": 3}),
        ("Clearly. One leader, everyone else in line", {"Beta": 3}),
        ("Earned. Whoever delivers leads", {"Gamma": 3}),
        ("Shared. Each person leads in their own craft", {"Delta": 3}),
    ),
    _q(
        "deep-soc-12", "socionics",
        "What atmosphere do you seek at the end of the day?",
        ("Playful and light", {"Alpha": 3}),
        ("Loud and passionate", {"Beta": 3}),
        ("Frank and businesslike", {"Gamma": 3}),
        ("Calm and kind", {"Delta": 3}),
    ),
    # Clubs
    _q(
        "deep-soc-13", "socionics",
        "What job would you take in a new town?",
        ("Scholar or investigator", {"Researcher": 3}),
        ("Diplomat or counselor", {"Social": 3}),
        ("Smith or engineer", {"Practical": 3}),
        ("Healer or innkeeper", {"Humanitarian": 3}),
    ),
    _q(
        "deep-soc-14", "socionics",
        "Which problem do you enjoy solving?",
        ("A puzzle nobody has cracked", {"Researcher": 3}),
        ("A feud between two families", {"Social": 3}),
        ("A bridge that keeps collapsing", {"Practical": 3}),
        ("A sick child nobody can help", {"Humanitarian": 3}),
    ),
    _q(
        "deep-soc-15", "socionics",
        "What do people come to you for?",
        ("Answers", {"Researcher": 3}),
        ("Advice about people", {"Social": 3}),
        ("Getting something built or fixed", {"Practical": 3}),
        ("Comfort", {"Humanitarian": 3}),
    ),
    _q(
        "deep-soc-16", "socionics",
        "What would you teach an apprentice?",
        ("How to think", {"Researcher": 3}),
        ("How to read a room", {"Social": 3}),
        ("How to work with their hands", {"Practical": 3}),
        ("How to care for others", {"Humanitarian": 3}),
    ),
)


# --- Expanded Instincts ------------------------------------------------------

QUICK_INSTINCT_CENTER_QUESTIONS: Tuple[QuizQuestion, ...] = (
    _q(
        "inst-1", "instincts",
        "Lost, without supplies or companions. What keeps you moving?",
        ("The need to survive and protect what is mine", {"SUR": 3}),
        ("The need to find my people again", {"INT": 3}),
        ("The need to know why I am here at all", {"PUR": 3}),
    ),
    _q(
        "inst-2", "instincts",
        "A vision shows your best possible life. What is in it?",
        ("Strength, security and self-reliance", {"SUR": 3}),
        ("Being woven into others, trusted and needed", {"INT": 3}),
        ("A life with weight and direction", {"PUR": 3}),
    ),
    _q(
        "inst-3", "instincts",
        "A curse will inflict one lasting wound. Which do you dread most?",
        ("Being exposed and unable to sustain myself", {"SUR": 3}),
        ("Being abandoned and misunderstood", {"INT": 3}),
        ("Feeling that nothing I do matters", {"PUR": 3}),
    ),
)

DEEP_INSTINCT_CENTER_QUESTIONS: Tuple[QuizQuestion, ...] = (
    _q(
        "deep-inst-1", "instincts",
        "What do you check before you sleep in a strange place?",
        ("Doors, weapons and supplies", {"SUR": 3}),
        ("That everyone I care about is settled", {"INT": 3}),
        ("Nothing. My mind is elsewhere", {"PUR": 3}),
    ),
    _q(
        "deep-inst-2", "instincts",
        "What kind of wealth matters to you?",
        ("A full larder and a strong roof", {"SUR": 3}),
        ("Friends in every town", {"INT": 3}),
        ("A life that meant something", {"PUR": 3}),
    ),
    _q(
        "deep-inst-3", "instincts",
        "Which question keeps you awake?",
        ("Will we have enough?", {"SUR": 3}),
        ("Do they really care about me?", {"INT": 3}),
        ("What is the point of any of this?", {"PUR": 3}),
    ),
    _q(
        "deep-inst-4", "instincts",
        "A stranger offers to trade. What do you want most?",
        ("Tools and provisions", {"SUR": 3}),
        ("News of people I know", {"INT": 3}),
        ("A book nobody else has read", {"PUR": 3}),
    ),
    _q(
        "deep-inst-5", "instincts",
        "What does home mean to you?",
        ("A place I can defend", {"SUR": 3}),
        ("The people, wherever they are", {"INT": 3}),
        ("A question I am still answering", {"PUR": 3}),
    ),
    _q(
        "deep-inst-6", "instincts",
        "Which failure stings worst?",
        ("Letting my body or resources run dry", {"SUR": 3}),
        ("Letting someone I love down", {"INT": 3}),
        ("Wasting years on the wrong path", {"PUR": 3}),
    ),
)

QUICK_REALM_QUESTIONS: Dict[str, Tuple[QuizQuestion, ...]] = {
    "SUR": (
        _q(
            "inst-sur-1", "instincts",
            "A harsh winter is coming. What is your first priority?",
            ("Toughen up and push through the cold", {"FD": 3}),
            ("Fortify the shelter. Nothing gets in", {"SY": 3}),
            ("Ration and routine. Discipline keeps us alive", {"SM": 3}),
        ),
        _q(
            "inst-sur-2", "instincts",
            "Wounded, with the fight not over. What keeps you going?",
            ("Grit. My body has survived worse", {"FD": 3, "SM": 1}),
            ("Fear of what happens if I stop", {"SY": 3, "FD": 1}),
            ("Composure. Manage the pain, stay effective", {"SM": 3, "SY": 1}),
        ),
        _q(
            "inst-sur-3", "instincts",
            "Storm closing in, no trail. What do you do first?",
            ("Push on. I can take more than the storm", {"FD": 3}),
            ("Find cover. Exposure kills fastest", {"SY": 3}),
            ("Take stock and ration what we have", {"SM": 3}),
        ),
        _q(
            "inst-sur-4", "instincts",
            "A young recruit asks you to teach them survival. What do you focus on?",
            ("Endurance past what the body thinks it can take", {"FD": 3, "SY": 1}),
            ("Reading danger before it arrives", {"SY": 3, "SM": 1}),
            ("Sleep, food and keeping yourself sharp", {"SM": 3, "FD": 1}),
        ),
        _q(
            "inst-sur-5", "instincts",
            "You may enchant one thing about yourself permanently.",
            ("An unbreakable constitution", {"FD": 3}),
            ("A sixth sense for danger", {"SY": 3}),
            ("Perfect self-control", {"SM": 3}),
        ),
    ),
    "INT": (
        _q(
            "inst-int-1", "instincts",
            "What draws you to a new companion?",
            ("The way they change me just by being near", {"AY": 3}),
            ("Their place among people I respect", {"CY": 3}),
            ("A feeling that we are bound for life", {"BG": 3}),
        ),
        _q(
            "inst-int-2", "instincts",
            "The party is fracturing. What do you do?",
            ("Stir things up until something new emerges", {"AY": 3, "CY": 1}),
            ("Call everyone together and restore order", {"CY": 3, "BG": 1}),
            ("Hold on tightly to the ones closest to me", {"BG": 3, "AY": 1}),
        ),
        _q(
            "inst-int-3", "instincts",
            "What kind of gathering feeds you?",
            ("Strangers mixing and sparking off each other", {"AY": 3}),
            ("A council where everyone has a role", {"CY": 3}),
            ("A quiet evening with my one true friend", {"BG": 3}),
        ),
        _q(
            "inst-int-4", "instincts",
            "A friend betrays the group. How do you react?",
            ("Something in me transforms. I am not who I was", {"AY": 3, "BG": 1}),
            ("The group must judge them together", {"CY": 3, "AY": 1}),
            ("It cuts to the bone. I keep the memory forever", {"BG": 3, "CY": 1}),
        ),
        _q(
            "inst-int-5", "instincts",
            "What would you most like to give others?",
            ("Change", {"AY": 3}),
            ("Belonging", {"CY": 3}),
            ("Devotion", {"BG": 3}),
        ),
    ),
    "PUR": (
        _q(
            "inst-pur-1", "instincts",
            "What do you seek in the ruins of old kingdoms?",
            ("Proof that I am meant for something", {"SS": 3}),
            ("The truth about how things came to be", {"EX": 3}),
            ("Whatever nobody has found yet", {"UN": 3}),
        ),
        _q(
            "inst-pur-2", "instincts",
            "A sage asks what you live for. What do you say?",
            ("To become who I am supposed to be", {"SS": 3, "EX": 1}),
            ("To face the hard questions head-on", {"EX": 3, "UN": 1}),
            ("To walk into the dark and see what is there", {"UN": 3, "SS": 1}),
        ),
        _q(
            "inst-pur-3", "instincts",
            "What kind of legacy matters?",
            ("A name that means something", {"SS": 3}),
            ("An answer others can build on", {"EX": 3}),
            ("A door left open for others", {"UN": 3}),
        ),
        _q(
            "inst-pur-4", "instincts",
            "You stand at the edge of the known map.",
            ("This is where my story becomes mine", {"SS": 3, "UN": 1}),
            ("This is where the real questions start", {"EX": 3, "SS": 1}),
            ("This is the only place I feel alive", {"UN": 3, "EX": 1}),
        ),
        _q(
            "inst-pur-5", "instincts",
            "Which fear haunts you most?",
            ("Being insignificant", {"SS": 3}),
            ("Living a meaningless life", {"EX": 3}),
            ("Never leaving the familiar", {"UN": 3}),
        ),
    ),
}

DEEP_REALM_QUESTIONS: Dict[str, Tuple[QuizQuestion, ...]] = {
    "SUR": (
        _q(
            "deep-inst-sur-1", "instincts",
            "Which hardship do you secretly take pride in?",
            ("Enduring pain others could not", {"FD": 3}),
            ("Never once being caught off guard", {"SY": 3}),
            ("Keeping my habits when everything fell apart", {"SM": 3}),
        ),
        _q(
            "deep-inst-sur-2", "instincts",
            "What makes a camp good?",
            ("It tests us", {"FD": 3, "SM": 1}),
            ("It is hidden and defensible", {"SY": 3, "FD": 1}),
            ("It runs on a schedule", {"SM": 3, "SY": 1}),
        ),
        _q(
            "deep-inst-sur-3", "instincts",
            "What would you never travel without?",
            ("Nothing. I travel light and hard", {"FD": 3}),
            ("A hidden weapon and a way out", {"SY": 3}),
            ("My own kit, arranged exactly so", {"SM": 3}),
        ),
        _q(
            "deep-inst-sur-4", "instincts",
            "How do you face a plague in the city?",
            ("Keep working. My body will hold", {"FD": 3, "SY": 1}),
            ("Seal the doors and wait it out", {"SY": 3, "SM": 1}),
            ("Strict hygiene and careful habits", {"SM": 3, "FD": 1}),
        ),
    ),
    "INT": (
        _q(
            "deep-inst-int-1", "instincts",
            "What is love, to you?",
            ("Something that remakes both people", {"AY": 3}),
            ("A place among others", {"CY": 3}),
            ("A bond that outlasts death", {"BG": 3}),
        ),
        _q(
            "deep-inst-int-2", "instincts",
            "What role do you play in a festival?",
            ("The spark that changes the mood", {"AY": 3, "CY": 1}),
            ("The organizer behind the scenes", {"CY": 3, "BG": 1}),
            ("The friend who stays by one side all night", {"BG": 3, "AY": 1}),
        ),
        _q(
            "deep-inst-int-3", "instincts",
            "Which loss would change you most?",
            ("Losing the thrill of meeting someone new", {"AY": 3}),
            ("Losing my community", {"CY": 3}),
            ("Losing my closest bond", {"BG": 3}),
        ),
        _q(
            "deep-inst-int-4", "instincts",
            "How do you heal a rift?",
            ("Let it transform us into something better", {"AY": 3, "BG": 1}),
            ("Agree on shared rules going forward", {"CY": 3, "AY": 1}),
            ("Stay loyal until it mends", {"BG": 3, "CY": 1}),
        ),
    ),
    "PUR": (
        _q(
            "deep-inst-pur-1", "instincts",
            "Which title would you accept?",
            ("The Chosen", {"SS": 3}),
            ("The Seeker of Truth", {"EX": 3}),
            ("The Wanderer Beyond", {"UN": 3}),
        ),
        _q(
            "deep-inst-pur-2", "instincts",
            "What do you do on a sleepless night?",
            ("Imagine who I will become", {"SS": 3, "EX": 1}),
            ("Wrestle with a question I cannot answer", {"EX": 3, "UN": 1}),
            ("Walk out into the dark", {"UN": 3, "SS": 1}),
        ),
        _q(
            "deep-inst-pur-3", "instincts",
            "What do you fear the gods would say about you?",
            ("That I was nobody", {"SS": 3}),
            ("That I never asked why", {"EX": 3}),
            ("That I stayed where it was safe", {"UN": 3}),
        ),
        _q(
            "deep-inst-pur-4", "instincts",
            "What calls you forward?",
            ("A destiny only I can fulfill", {"SS": 3, "UN": 1}),
            ("The need to understand", {"EX": 3, "SS": 1}),
            ("The unknown itself", {"UN": 3, "EX": 1}),
        ),
    ),
}


# --- Lookups -----------------------------------------------------------------

QUESTION_BANKS: Dict[str, Dict[str, Tuple[QuizQuestion, ...]]] = {
    "quick": {
        "attitudinal": QUICK_AP_QUESTIONS,
        "enneagram": QUICK_ENNEAGRAM_QUESTIONS,
        "mbti": QUICK_MBTI_QUESTIONS,
        "socionics": QUICK_SOCIONICS_QUESTIONS,
        "instincts": QUICK_INSTINCT_CENTER_QUESTIONS,
    },
    "deep": {
        "attitudinal": DEEP_AP_QUESTIONS,
        "enneagram": DEEP_ENNEAGRAM_QUESTIONS,
        "mbti": DEEP_MBTI_QUESTIONS,
        "socionics": DEEP_SOCIONICS_QUESTIONS,
        "instincts": DEEP_INSTINCT_CENTER_QUESTIONS,
    },
}

REALM_BANKS: Dict[str, Dict[str, Tuple[QuizQuestion, ...]]] = {
    "quick": QUICK_REALM_QUESTIONS,
    "deep": DEEP_REALM_QUESTIONS,
}

SECTION_INTROS: Dict[str, str] = {
    "attitudinal": "The spirits weigh your inner compass. Which forces shape your will?",
    "enneagram": "The wheel of nine turns before you. What archetype do you embody?",
    "mbti": "The cognitive forge ignites. How does your mind shape the world?",
    "socionics": "The four quadras call from the void. Where does your soul find kinship?",
    "instincts": "The primal currents surge. What drives you at your core?",
}


def _require_mode(mode: str) -> str:
    if mode not in QUIZ_MODES:
        raise InvalidInputError(f"Unknown quiz mode: {mode!r}", field="mode")
    return mode


def questions_for(mode: str, enabled: Optional[Iterable[str]] = None) -> List[QuizQuestion]:
    """Base question list for `mode`, in system order. Realm questions are not included."""
    bank = QUESTION_BANKS[_require_mode(mode)]
    systems = SYSTEM_IDS if enabled is None else [s for s in SYSTEM_IDS if s in set(enabled)]
    questions: List[QuizQuestion] = []
    for system in systems:
        questions.extend(bank[system])
    return questions


def realm_questions_for(mode: str, center: str) -> List[QuizQuestion]:
    """Realm-stage questions for an instinct center."""
    if center not in INSTINCT_CENTERS:
        raise InvalidInputError(f"Unknown instinct center: {center!r}", field="instincts.center")
    return list(REALM_BANKS[_require_mode(mode)][center])


def is_realm_question_id(question_id: str) -> bool:
    return bool(_REALM_ID_RE.match(question_id))


def find_question(mode: str, question_id: str) -> Optional[QuizQuestion]:
    """Look up any question of `mode` (base or realm) by id."""
    for question in questions_for(mode):
        if question.id == question_id:
            return question
    for realm_questions in REALM_BANKS[mode].values():
        for question in realm_questions:
            if question.id == question_id:
                return question
    return None
