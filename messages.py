# messages.py
from collections import namedtuple

Celebration = namedtuple("Celebration", ["title", "message", "icon"])

# Shown in order each time the user insists on "No"; wraps forever
DECLINE_MESSAGES = [
    "Are you sure?",
    "Really sure?",
    "Last chance?",
    "This might hurt Roy's feelings...",
    "Roy's mom will be sad.",
    "The approval meter is watching.",
    "Okay but... why though?",
    "We could just pretend you meant Yes?",
    "Roy believes in second chances.",
    "Just... think about it?",
    "We're not mad. Just disappointed.",
    "The No button is tired. Let it rest.",
    "Yes is literally right there. Right. There.",
    "Roy is waiting. Patiently. Maybe too patiently.",
]

# One per Yes click until exhausted, then REPEAT_MESSAGES takes over
SUCCESS_MESSAGES = [
    Celebration("Correct Answer!", "You have excellent judgment. Roy appreciates you.", "🎉"),
    Celebration("Exactly Right!", "Roy knew you'd see it his way. Good call.", "✨"),
    Celebration("So Wise!", "Your wisdom has been recorded. Roy is pleased.", "🌟"),
    Celebration("Perfect Choice!", "The approval meter just smiled. You did it.", "👍"),
    Celebration("Roy Approved!", "You're officially on Roy's good list. Welcome.", "👑"),
    Celebration("Great Minds Think Alike!", "You and Roy agree. As it should be.", "🤝"),
    Celebration("Another Win!", "Consistency is key. You keep making the right choice.", "🏆"),
    Celebration("Couldn't Agree More!", "Roy is nodding approvingly from wherever he is.", "😌"),
    Celebration("You Get It!", "Finally, someone who understands. Roy salutes you.", "🎖️"),
    Celebration("Legendary Choice!", "Future generations will study this moment. Well done.", "📜"),
]

REPEAT_MESSAGES = [
    Celebration("Still Right!", "Roy has run out of new compliments. This one is recycled, but sincere.", "♻️"),
    Celebration("Yes Again!", "At this point Roy considers you family.", "🏡"),
    Celebration("A True Believer!", "Your dedication to Yes has been noted in the permanent record.", "📝"),
    Celebration("Unstoppable!", "The No button has filed a complaint. Roy ignored it.", "🚀"),
    Celebration("Hall of Fame!", "Roy is having a plaque made. It just says 'Yes'.", "🏅"),
]

# Slider commentary, lowest annoyance first
ANNOYANCE_COMMENTARY = [
    "Totally zen. Roy is flattered.",
    "A little twitchy, but fine.",
    "Mildly perturbed. Understandable.",
    "Getting warm in here.",
    "Seriously annoyed. Roy is taking notes.",
    "Maximum annoyance. Roy feels seen.",
]
