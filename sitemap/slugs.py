import re

_WHITESPACE = re.compile(r'\s+')
_DISALLOWED = re.compile(r'[^a-z0-9-]')
_HYPHENS = re.compile(r'-+')


def normalize(text):
    """Turn a title into a url slug: 'Wi-Fi & Router Setup ' -> 'wi-fi-router-setup'.

    Never fails. Anything without a letter or digit comes back as ''.
    """
    if text is None:
        return ''
    slug = _WHITESPACE.sub('-', str(text).lower().strip())
    slug = _DISALLOWED.sub('', slug)
    slug = _HYPHENS.sub('-', slug)
    return slug.strip('-')


def unique_slugs(items, fallback):
    """Slug a collection so that no two members share a slug.

    items: ordered (key, title) pairs. The first holder of a slug keeps it,
    later ones get -2, -3, ... Titles with an empty slug use fallback(key).
    Returns ({key: slug}, [warning, ...]).
    """
    taken = set()
    slugs = {}
    warnings = []
    pending = []
    for key, title in items:
        slug = normalize(title)
        if not slug:
            slug = normalize(fallback(key))
            warnings.append(f"'{title}' has no usable characters, using '{slug}'")
        pending.append((key, title, slug))

    # Bare slugs are claimed first so a literal 'x-2' title keeps its slug
    # over a suffixed duplicate of 'x'.
    bare = {}
    for key, title, slug in pending:
        bare.setdefault(slug, key)
    taken.update(bare)

    for key, title, slug in pending:
        if bare[slug] == key:
            slugs[key] = slug
            continue
        n = 2
        while f'{slug}-{n}' in taken:
            n += 1
        slugs[key] = f'{slug}-{n}'
        taken.add(slugs[key])
        warnings.append(f"'{title}' collides on '{slug}', using '{slugs[key]}'")
    return slugs, warnings
