"""
seed.py — Built-in Word List
=============================
The words the default "custom-words" database is filled with when a
DatabaseManager is constructed.  Each row is
(word, frequency, category, description).
"""

from typing import List, Tuple

SeedRow = Tuple[str, int, str, str]

CUSTOM_WORDS: List[SeedRow] = [
    ("adventure", 850, "noun", "An exciting or unusual experience"),
    ("beautiful", 920, "adjective", "Pleasing to the senses or mind"),
    ("challenge", 780, "noun", "A difficult task or situation"),
    ("discovery", 650, "noun", "The action of finding something new"),
    ("elephant", 590, "animal", "Large mammal with a trunk"),
    ("friendship", 720, "noun", "The state of being friends"),
    ("garden", 680, "place", "An area for growing plants"),
    ("happiness", 890, "emotion", "The feeling of joy and contentment"),
    ("imagination", 760, "noun", "The ability to form mental images"),
    ("journey", 810, "noun", "An act of traveling from one place to another"),
    ("knowledge", 870, "noun", "Information and understanding"),
    ("laughter", 640, "emotion", "The action of laughing"),
    ("mountain", 580, "nature", "A large elevated landform"),
    ("opportunity", 750, "noun", "A favorable circumstance"),
    ("patience", 690, "virtue", "The ability to wait calmly"),
    ("rainbow", 520, "nature", "An arc of colors in the sky"),
    ("success", 940, "noun", "The accomplishment of an aim"),
    ("treasure", 570, "noun", "Something of great value"),
    ("universe", 660, "science", "All existing matter and space"),
    ("victory", 710, "noun", "An act of defeating an opponent"),
    ("wisdom", 800, "virtue", "The quality of having experience and judgment"),
    ("excellence", 730, "quality", "The quality of being outstanding"),
    ("youthful", 480, "adjective", "Having the qualities of youth"),
    ("zenith", 390, "noun", "The highest point reached"),
    ("amazing", 860, "adjective", "Causing wonder or surprise"),
    ("brilliant", 770, "adjective", "Exceptionally clever or talented"),
    ("creative", 820, "adjective", "Having the ability to create"),
    ("delicious", 690, "taste", "Having a pleasant taste"),
    ("energetic", 610, "adjective", "Full of energy"),
    ("fantastic", 750, "adjective", "Extraordinarily good"),
    ("gorgeous", 680, "adjective", "Very beautiful"),
    ("hilarious", 540, "adjective", "Extremely funny"),
    ("incredible", 830, "adjective", "Impossible to believe"),
    ("joyful", 620, "emotion", "Feeling happiness"),
    ("kindness", 790, "virtue", "The quality of being kind"),
    ("magnificent", 670, "adjective", "Extremely beautiful"),
    ("optimistic", 710, "attitude", "Hopeful about the future"),
    ("peaceful", 650, "adjective", "Free from disturbance"),
    ("quality", 880, "noun", "The standard of something"),
    ("remarkable", 720, "adjective", "Worthy of attention"),
    ("spectacular", 640, "adjective", "Beautiful in a dramatic way"),
    ("tremendous", 590, "adjective", "Very great in amount"),
    ("unique", 850, "adjective", "Being the only one of its kind"),
    ("vibrant", 700, "adjective", "Full of energy and life"),
    ("wonderful", 910, "adjective", "Inspiring delight"),
    ("excellent", 780, "adjective", "Extremely good"),
    ("charming", 560, "adjective", "Pleasant and attractive"),
    ("delightful", 630, "adjective", "Causing delight"),
    ("inspiring", 740, "adjective", "Having the effect of inspiring"),
    ("marvelous", 580, "adjective", "Causing wonder"),
    ("pleasant", 670, "adjective", "Giving a sense of happy satisfaction"),
    ("refreshing", 520, "adjective", "Serving to refresh"),
    ("satisfying", 660, "adjective", "Giving satisfaction"),
    ("thrilling", 610, "adjective", "Causing excitement"),
    ("uplifting", 550, "adjective", "Morally or spiritually elevating"),
    ("vivid", 640, "adjective", "Producing powerful feelings"),
    ("welcoming", 580, "adjective", "Behaving in a friendly way"),
    ("zealous", 420, "adjective", "Having great energy for something"),
    ("affection", 690, "emotion", "A gentle feeling of fondness"),
    ("blissful", 480, "emotion", "Extremely happy"),
    ("compassion", 720, "virtue", "Sympathetic concern for others"),
    ("devotion", 610, "emotion", "Love and loyalty"),
    ("empathy", 750, "virtue", "Understanding others feelings"),
    ("gratitude", 820, "virtue", "The quality of being thankful"),
    ("harmony", 680, "noun", "Agreement and peaceful coexistence"),
    ("integrity", 790, "virtue", "The quality of being honest"),
    ("jubilant", 440, "emotion", "Feeling triumphantly happy"),
    ("loyalty", 760, "virtue", "Faithfulness to commitments"),
    ("nurturing", 620, "quality", "Caring for and encouraging growth"),
    ("perseverance", 670, "virtue", "Persistence in doing something"),
    ("respect", 890, "virtue", "Admiration for someone"),
    ("sincerity", 580, "virtue", "The quality of being genuine"),
    ("tolerance", 710, "virtue", "Willingness to accept differences"),
    ("understanding", 830, "virtue", "Sympathetic awareness"),
    ("generosity", 740, "virtue", "The quality of being generous"),
    ("honesty", 850, "virtue", "The quality of being truthful"),
    ("humility", 640, "virtue", "A modest view of ones importance"),
    ("courage", 870, "virtue", "The ability to face difficulty"),
    ("determination", 780, "quality", "Firmness of purpose"),
    ("enthusiasm", 720, "emotion", "Intense enjoyment"),
    ("fascination", 590, "emotion", "The power to attract interest"),
    ("gratification", 520, "emotion", "Pleasure from satisfaction"),
    ("inspiration", 860, "noun", "The process of being mentally stimulated"),
    ("meditation", 650, "practice", "The practice of focused thinking"),
    ("reflection", 700, "activity", "Serious thought or consideration"),
    ("serenity", 580, "emotion", "The state of being calm"),
    ("tranquility", 560, "state", "The quality of being tranquil"),
    ("admiration", 660, "emotion", "Respect and warm approval"),
    ("appreciation", 750, "emotion", "Recognition of the worth of something"),
    ("celebration", 680, "activity", "The action of celebrating"),
    ("dedication", 720, "quality", "The quality of being committed"),
    ("fulfillment", 640, "emotion", "Satisfaction from achievement"),
    ("accomplishment", 700, "noun", "Something achieved successfully"),
    ("aspiration", 620, "noun", "A hope or ambition"),
    ("breakthrough", 580, "noun", "A sudden important development"),
    ("contribution", 760, "noun", "The part played in bringing about a result"),
    ("development", 840, "noun", "The process of growth"),
    ("evolution", 690, "science", "Gradual development"),
    ("exploration", 650, "activity", "The action of exploring"),
    ("innovation", 780, "noun", "The introduction of new ideas"),
    ("progress", 820, "noun", "Forward movement toward a destination"),
    ("transformation", 710, "noun", "A complete change"),
    ("achievement", 800, "noun", "A thing done successfully"),
    ("milestone", 570, "noun", "A significant stage in development"),
    ("pinnacle", 450, "noun", "The highest point of development"),
    ("triumph", 620, "noun", "A great victory or achievement"),
]
