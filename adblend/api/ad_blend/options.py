"""Preset choices offered by the ad builder form. Free-text values are accepted as well."""

from adblend.api.ad_blend.schemas import AdBlendOptions, OptionItem

ACTIONS = [
    OptionItem(value="standing gracefully", label="Standing"),
    OptionItem(value="lying down comfortably", label="Lying Down"),
    OptionItem(value="holding delicately", label="Holding"),
    OptionItem(value="sitting elegantly on top of", label="Sitting On"),
    OptionItem(value="leaning against", label="Leaning"),
    OptionItem(value="walking past", label="Walking Past"),
    OptionItem(value="pointing towards", label="Pointing To"),
]

STYLES = [
    OptionItem(value="full-body shot", label="Full-Body Shot"),
    OptionItem(value="medium shot", label="Medium Shot"),
    OptionItem(value="close-up", label="Close-Up"),
    OptionItem(value="cinematic", label="Cinematic"),
    OptionItem(value="dramatic", label="Dramatic"),
]

BACKGROUNDS = [
    OptionItem(value="minimalist studio", label="Minimalist Studio"),
    OptionItem(value="luxury hotel lobby", label="Luxury Hotel Lobby"),
    OptionItem(value="urban street at night", label="Urban Street at Night"),
    OptionItem(value="serene beach at sunset", label="Beach at Sunset"),
    OptionItem(value="futuristic cityscape", label="Futuristic City"),
    OptionItem(value="lush green forest", label="Lush Forest"),
]


def get_options() -> AdBlendOptions:
    return AdBlendOptions(actions=ACTIONS, styles=STYLES, backgrounds=BACKGROUNDS)
