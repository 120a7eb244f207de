"""Fixed tip catalog — compiled in, never loaded, never empty.

Tier 3 always falls back to one of these records, so the list must stay
non-empty with unique, contiguous ids starting at 1.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TipRecord:
    id: int
    icon: str  # Symbol name
    title: str  # Bold headline (2-4 words)
    subtitle: str  # One clear sentence


TIPS: tuple[TipRecord, ...] = (
    # Permission-Giving (1-10)
    TipRecord(1, "clock", "Five Minutes Counts", "A 5-minute walk is infinitely better than no walk."),
    TipRecord(2, "tortoise", "Slow Counts", "You don't have to walk fast. Any pace builds the habit."),
    TipRecord(3, "checkmark.circle", "Short Is Fine", "A 10-minute walk still counts. Don't let time stop you."),
    TipRecord(4, "shoe", "No Gear Needed", "You don't need special shoes. Just go."),
    TipRecord(5, "hand.thumbsup", "Imperfect Days Count", "Walked less than usual? You still showed up."),
    TipRecord(6, "arrow.up.right", "Start Small", "The goal isn't to walk far. It's to walk often."),
    TipRecord(7, "arrow.triangle.2.circlepath", "Progress Not Perfection", "Missing one day doesn't erase your progress."),
    TipRecord(8, "star", "Good Enough Wins", "A short walk beats a perfect walk that never happens."),
    TipRecord(9, "figure.walk.motion", "Motivation Follows Action", "Don't wait to feel like it. Start, then feel it."),
    TipRecord(10, "figure.walk", "Walking Is Enough", "You don't need to run. Walking is complete exercise."),
    # Finding Opportunities (11-20)
    TipRecord(11, "hourglass", "Use the Wait", "Waiting for something? Pace around. Steps are steps."),
    TipRecord(12, "chair", "Break the Sit", "A 2-minute walk every hour adds up fast."),
    TipRecord(13, "phone", "Walk Your Calls", "Take phone calls on your feet."),
    TipRecord(14, "car", "Parking Lot Bonus", "Early for something? Walk the lot first."),
    TipRecord(15, "arrow.triangle.swap", "Walk the Long Way", "Take the scenic route. Extra steps, same destination."),
    TipRecord(16, "bag", "Errand Walk", "Walk to one nearby errand. Small trips add up."),
    TipRecord(17, "lightbulb", "Walk While Thinking", "Got a decision to make? Walk on it."),
    TipRecord(18, "tv", "TV Break Steps", "Walk during commercials. 100 steps at a time."),
    TipRecord(19, "sun.max", "Lunch Break Walk", "Even 10 minutes outside resets your afternoon."),
    TipRecord(20, "person.2", "Walk to Talk", "Need to catch up with someone? Walk together."),
    # Health Benefits (21-30)
    TipRecord(21, "face.smiling", "Mood Boost", "A 10-minute walk can lift your mood for 2 hours."),
    TipRecord(22, "heart", "Heart Health", "Walking 30 min daily lowers heart disease risk by 35%."),
    TipRecord(23, "calendar", "Add Years", "Regular walkers live an average of 7 years longer."),
    TipRecord(24, "chart.line.uptrend.xyaxis", "Steps Compound", "1,000 extra steps daily = 365,000 steps a year."),
    TipRecord(25, "fork.knife", "Blood Sugar Help", "A post-meal walk cuts blood sugar spikes by 30%."),
    TipRecord(26, "brain.head.profile", "Brain Builder", "Walking grows the part of your brain that handles memory."),
    TipRecord(27, "shield", "Fewer Sick Days", "Regular walkers get 43% fewer colds."),
    TipRecord(28, "moon.zzz", "Better Sleep", "Walkers fall asleep faster and sleep deeper."),
    TipRecord(29, "figure.walk.circle", "Joint Health", "Walking lubricates joints. Movement is medicine."),
    TipRecord(30, "clock.arrow.2.circlepath", "No Time? No Problem", "Three 10-minute walks equal one 30-minute walk."),
    # Mental Benefits (31-40)
    TipRecord(31, "wind", "Walk It Off", "Stressed? A 15-minute walk lowers cortisol fast."),
    TipRecord(32, "puzzlepiece", "Unstick Your Brain", "Stuck on a problem? Walking helps connect the dots."),
    TipRecord(33, "arrow.clockwise", "Mood Reset", "Feeling off? A quick walk can shift your entire day."),
    TipRecord(34, "leaf", "Anxiety Relief", "Walking calms your nervous system naturally."),
    TipRecord(35, "paintbrush", "Creative Boost", "Stanford found walking increases creativity by 60%."),
    TipRecord(36, "cloud.fog", "Clear the Fog", "Mental fatigue? Walking restores focus better than coffee."),
    TipRecord(37, "heart.circle", "Process Emotions", "Walking helps your brain work through hard feelings."),
    TipRecord(38, "bolt.shield", "Stress Buffer", "Regular walkers handle stress better over time."),
    TipRecord(39, "battery.100.bolt", "Energy Paradox", "Feeling tired? Walking creates energy, not drains it."),
    TipRecord(40, "tree", "Nature Multiplier", "Walking outside amplifies every benefit."),
    # Habit Wisdom (41-50)
    TipRecord(41, "repeat", "Consistency Wins", "A short walk daily beats a long walk weekly."),
    TipRecord(42, "arrow.right.circle", "Just Start", "You don't have to feel ready. Just step outside."),
    TipRecord(43, "alarm", "Same Time Helps", "Walk at the same time daily. Routine builds habits."),
    TipRecord(44, "shoe.circle", "The First Step", "The hardest part is shoes on. Then momentum takes over."),
    TipRecord(45, "person.fill.checkmark", "Identity Shift", "You're not trying to walk more. You're becoming a walker."),
    TipRecord(46, "checkmark.seal", "Show Up Streak", "Every walk is a vote for the person you want to be."),
    TipRecord(47, "2.circle", "Two-Day Rule", "Never skip twice. One miss is fine. Two breaks momentum."),
    TipRecord(48, "gift", "Future You Thanks You", "Today's walk is a gift to tomorrow."),
    TipRecord(49, "chart.bar.fill", "Compound Interest", "Today's steps are tomorrow's strength."),
    TipRecord(50, "sparkles", "Already a Walker", "You've walked your whole life. Now you're just intentional."),
)

TIPS_BY_ID: dict[int, TipRecord] = {t.id: t for t in TIPS}


def get_tip(tip_id: int) -> TipRecord | None:
    return TIPS_BY_ID.get(tip_id)


def list_tips() -> list[TipRecord]:
    return list(TIPS)


def tip_ids(catalog: tuple[TipRecord, ...] = TIPS) -> list[int]:
    return [t.id for t in catalog]
