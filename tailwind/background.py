"""
Background Matcher
background shorthand and longhands except background-color, which the color
matcher owns.
"""

from typing import List, Optional

from tailwind.color import color_suffix, is_color_value
from tailwind.matcher import Matcher, as_classes
from tailwind.tokenizer import split_commas, split_whitespace, underscore_spaces

BACKGROUND_PROPERTIES = [
    'background',
    'background-image',
    'background-position',
    'background-size',
    'background-repeat',
    'background-attachment',
    'background-clip',
    'background-origin',
]

POSITION_MAP = {
    'center': 'bg-center',
    'center center': 'bg-center',
    'top': 'bg-top',
    'center top': 'bg-top',
    'top center': 'bg-top',
    'bottom': 'bg-bottom',
    'center bottom': 'bg-bottom',
    'bottom center': 'bg-bottom',
    'left': 'bg-left',
    'left center': 'bg-left',
    'center left': 'bg-left',
    'right': 'bg-right',
    'right center': 'bg-right',
    'center right': 'bg-right',
    'left top': 'bg-left-top',
    'top left': 'bg-left-top',
    'right top': 'bg-right-top',
    'top right': 'bg-right-top',
    'left bottom': 'bg-left-bottom',
    'bottom left': 'bg-left-bottom',
    'right bottom': 'bg-right-bottom',
    'bottom right': 'bg-right-bottom',
}

POSITION_KEYWORDS = {'center', 'top', 'bottom', 'left', 'right'}

SIZE_MAP = {
    'auto': 'bg-auto',
    'cover': 'bg-cover',
    'contain': 'bg-contain',
}

REPEAT_MAP = {
    'repeat': 'bg-repeat',
    'no-repeat': 'bg-no-repeat',
    'repeat-x': 'bg-repeat-x',
    'repeat-y': 'bg-repeat-y',
    'round': 'bg-repeat-round',
    'space': 'bg-repeat-space',
}

ATTACHMENT_MAP = {
    'fixed': 'bg-fixed',
    'local': 'bg-local',
    'scroll': 'bg-scroll',
}

BOX_MAP = {
    'border-box': 'border',
    'padding-box': 'padding',
    'content-box': 'content',
    'text': 'text',
}

IMAGE_PREFIXES = ('url(', 'linear-gradient(', 'radial-gradient(', 'conic-gradient(',
                  'repeating-linear-gradient(', 'repeating-radial-gradient(', 'image-set(')


def is_image(token: str) -> bool:
    return token.lower().startswith(IMAGE_PREFIXES)


def convert_image(value: str) -> str:
    if value.strip().lower() == 'none':
        return 'bg-none'
    return f"bg-[image:{underscore_spaces(value.strip())}]"


def convert_position(value: str) -> str:
    val = ' '.join(value.strip().lower().split())
    return POSITION_MAP.get(val) or f"bg-[position:{underscore_spaces(value.strip())}]"


def convert_size(value: str) -> str:
    val = value.strip().lower()
    return SIZE_MAP.get(val) or f"bg-[size:{underscore_spaces(value.strip())}]"


def convert_background_shorthand(value: str) -> Optional[List[str]]:
    """
    Classify each token of the last background layer. Earlier layers only
    contribute images.
    """
    layers = split_commas(value)
    if not layers:
        return None
    if value.strip().lower() == 'none':
        return ['bg-none']

    classes = []
    images = [layer for layer in layers[:-1] if is_image(layer)]
    color = None
    position: List[str] = []
    size = None
    boxes = []
    last_layer_tokens = []
    for token in split_whitespace(layers[-1]):
        if '/' in token and '(' not in token and token != '/':
            before, _, after = token.partition('/')
            last_layer_tokens.extend(t for t in (before, '/', after) if t)
        else:
            last_layer_tokens.append(token)
    index = 0
    while index < len(last_layer_tokens):
        token = last_layer_tokens[index]
        lowered = token.lower()
        if is_image(token):
            images.append(token)
        elif lowered in REPEAT_MAP:
            classes.append(REPEAT_MAP[lowered])
        elif lowered in ATTACHMENT_MAP:
            classes.append(ATTACHMENT_MAP[lowered])
        elif lowered in BOX_MAP:
            boxes.append(lowered)
        elif token == '/':
            # position / size
            size_tokens = []
            index += 1
            while index < len(last_layer_tokens) and len(size_tokens) < 2:
                candidate = last_layer_tokens[index]
                if candidate.lower() in SIZE_MAP or candidate[0].isdigit() or candidate.startswith('.'):
                    size_tokens.append(candidate)
                    index += 1
                else:
                    break
            size = ' '.join(size_tokens)
            continue
        elif is_color_value(token):
            color = token
        elif lowered in POSITION_KEYWORDS or token[0].isdigit() or token.startswith(('-', '.')):
            position.append(token)
        else:
            return None
        index += 1

    if color:
        suffix = color_suffix(color)
        if suffix:
            classes.insert(0, f"bg-{suffix}")
    if images:
        classes.append(convert_image(', '.join(images)))
    if position:
        classes.append(convert_position(' '.join(position)))
    if size:
        classes.append(convert_size(size))
    if boxes:
        # One box keyword sets both origin and clip
        origin = boxes[0]
        clip = boxes[1] if len(boxes) > 1 else boxes[0]
        if origin != 'text':
            classes.append(f"bg-origin-{BOX_MAP[origin]}")
        classes.append(f"bg-clip-{BOX_MAP[clip]}")
    return as_classes(*classes)


class BackgroundMatcher(Matcher):
    name = 'background'
    properties = frozenset(BACKGROUND_PROPERTIES)

    def convert(self, prop, value, settings):
        val = value.strip().lower()
        if prop == 'background':
            return convert_background_shorthand(value)
        if prop == 'background-image':
            return [convert_image(value)]
        if prop == 'background-position':
            return [convert_position(value)]
        if prop == 'background-size':
            return [convert_size(value)]
        if prop == 'background-repeat':
            cls = REPEAT_MAP.get(val)
            return [cls] if cls else None
        if prop == 'background-attachment':
            cls = ATTACHMENT_MAP.get(val)
            return [cls] if cls else None
        box = BOX_MAP.get(val)
        if not box:
            return None
        if prop == 'background-clip':
            return [f"bg-clip-{box}"]
        if box == 'text':
            return None
        return [f"bg-origin-{box}"]
