"""Starter vocabulary given to an account that has no cards yet."""

from backend.store import NewCard

_PAIRS = [
    ("abandon", "to leave behind completely"),
    ("abundant", "existing in large quantities"),
    ("accurate", "correct in every detail"),
    ("acquire", "to gain or obtain"),
    ("adapt", "to change to suit new conditions"),
    ("adequate", "good enough for a purpose"),
    ("advocate", "to publicly support a cause"),
    ("ambiguous", "open to more than one interpretation"),
    ("anticipate", "to expect or predict"),
    ("apparent", "clearly visible or understood"),
    ("arbitrary", "based on chance rather than reason"),
    ("assess", "to judge the quality or value of"),
    ("assume", "to suppose without proof"),
    ("benevolent", "well-meaning and kind"),
    ("brief", "lasting a short time"),
    ("candid", "truthful and straightforward"),
    ("cautious", "careful to avoid danger"),
    ("coherent", "logical and consistent"),
    ("coincide", "to happen at the same time"),
    ("compel", "to force someone to do something"),
    ("compile", "to collect into a list or book"),
    ("comprehensive", "including everything"),
    ("concise", "short and clear"),
    ("consensus", "general agreement"),
    ("constrain", "to restrict or limit"),
    ("contradict", "to state the opposite of"),
    ("crucial", "extremely important"),
    ("curious", "eager to know or learn"),
    ("deceive", "to make someone believe something false"),
    ("decline", "to refuse politely; to decrease"),
    ("deduce", "to reach a conclusion by reasoning"),
    ("deliberate", "done on purpose"),
    ("diligent", "showing care and effort in work"),
    ("diminish", "to make or become less"),
    ("discreet", "careful not to attract attention"),
    ("dispute", "a disagreement or argument"),
    ("distinct", "clearly different"),
    ("diverse", "showing a great deal of variety"),
    ("durable", "able to last a long time"),
    ("eager", "wanting very much to do something"),
    ("elaborate", "detailed and complicated"),
    ("eloquent", "fluent and persuasive in speech"),
    ("emerge", "to come into view"),
    ("emphasize", "to give special importance to"),
    ("endure", "to suffer patiently; to last"),
    ("enhance", "to improve the quality of"),
    ("evident", "plain or obvious"),
    ("exaggerate", "to make something seem larger than it is"),
    ("explicit", "stated clearly and in detail"),
    ("feasible", "possible to do easily"),
    ("fluctuate", "to rise and fall irregularly"),
    ("frugal", "careful with money"),
    ("generous", "willing to give more than expected"),
    ("genuine", "truly what it is said to be"),
    ("gratitude", "the quality of being thankful"),
    ("hesitate", "to pause before acting"),
    ("hypothesis", "a proposed explanation to be tested"),
    ("identical", "exactly the same"),
    ("illustrate", "to explain with examples"),
    ("imminent", "about to happen"),
    ("implement", "to put into effect"),
    ("implicit", "suggested but not directly expressed"),
    ("inevitable", "certain to happen"),
    ("inherent", "existing as a natural part of something"),
    ("initiate", "to cause to begin"),
    ("integrity", "the quality of being honest"),
    ("interpret", "to explain the meaning of"),
    ("intricate", "very complicated or detailed"),
    ("keen", "eager or enthusiastic"),
    ("legitimate", "allowed by law or rules"),
    ("meticulous", "showing great attention to detail"),
    ("mitigate", "to make less severe"),
    ("modest", "not boastful about one's abilities"),
    ("negligible", "so small it can be ignored"),
    ("notion", "an idea or belief"),
    ("obscure", "not well known; unclear"),
    ("obsolete", "no longer in use"),
    ("obtain", "to get or acquire"),
    ("optimistic", "hopeful about the future"),
    ("outcome", "the way something turns out"),
    ("persevere", "to continue despite difficulty"),
    ("persuade", "to convince someone to do something"),
    ("plausible", "seeming reasonable or probable"),
    ("precise", "exact and accurate"),
    ("predominant", "present as the strongest element"),
    ("profound", "very great or intense; deep"),
    ("prominent", "important or famous"),
    ("prudent", "acting with care for the future"),
    ("pursue", "to follow or chase"),
    ("reluctant", "unwilling and hesitant"),
    ("resilient", "able to recover quickly"),
    ("retain", "to keep possession of"),
    ("rigorous", "extremely thorough and careful"),
    ("scarce", "in short supply"),
    ("scrutinize", "to examine closely"),
    ("significant", "important or large enough to notice"),
    ("sincere", "free from pretence"),
    ("subtle", "delicate and hard to notice"),
    ("sufficient", "enough for a purpose"),
    ("tedious", "too long and boring"),
    ("tentative", "not certain or fixed"),
    ("thrive", "to grow or develop well"),
    ("tranquil", "calm and peaceful"),
    ("trivial", "of little importance"),
    ("ubiquitous", "found everywhere"),
    ("undermine", "to weaken gradually"),
    ("vague", "not clearly expressed"),
    ("versatile", "able to adapt to many uses"),
    ("vivid", "producing strong, clear images"),
    ("zealous", "showing great energy for a cause"),
]

SEED_WORDS = [NewCard(word, meaning) for word, meaning in _PAIRS]
