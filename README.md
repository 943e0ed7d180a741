# imagereloc

Tools for working with container image references when relocating images
from one registry to another. It has no dependencies outside the standard
library.

The package provides:

- `imagereloc.digest`: content digests (`Digest`, `parse_digest`,
  `EMPTY_DIGEST`), checked in the `alg:hash` form. The algorithms
  `sha256`, `sha384` and `sha512` are accepted, and the hash must be
  lower-case hex of the right length for its algorithm.
- `imagereloc.name`: image references (`Name`, `parse_name`,
  `EMPTY_NAME`). Parsing normalizes Docker Hub names, so `ubuntu` becomes
  `docker.io/library/ubuntu`. A `Name` has `name()`, `host()`, `path()`,
  `tag()`, `digest()`, `normalize()`, `with_tag()`, `with_digest()`,
  `without_digest()`, `without_tag_or_digest()` and `synonyms()`. Names
  compare equal by value and can be hashed.
- `imagereloc.imageset`: `ImageSet`, an immutable set of image references.
  It supports `union()`, iteration, `len()`, `strings()` (sorted) and JSON
  conversion with `to_json()` and `ImageSet.from_json()`. `EMPTY` is the
  empty set.
- `imagereloc.pathmapping`: `flatten_repo_path` and
  `flatten_repo_path_preserve_tag_digest`. Each maps an image to a
  repository under a new prefix. The new repository name is the original
  path joined with `-`, followed by an MD5 hash of the original name. When
  the result would be longer than 255 characters, parts of the path are
  left out.
- `imagereloc.cli`: the `irel` command, with `cli_version()`,
  `build_parser()` and `main()`.

## Installation

```
pip install .
```

## Library use

```python
from imagereloc.name import parse_name
from imagereloc.pathmapping import flatten_repo_path_preserve_tag_digest

ref = parse_name("ubuntu:18.10")
print(ref)              # docker.io/library/ubuntu:18.10
print(ref.path())       # library/ubuntu
print(ref.tag())        # 18.10
print([str(s) for s in ref.synonyms()])
# ubuntu:18.10, library/ubuntu:18.10, docker.io/... and index.docker.io/... forms

mapped = flatten_repo_path_preserve_tag_digest("registry.example.com/team", ref)
print(mapped)           # registry.example.com/team/library-ubuntu-<md5>:18.10
```

An invalid reference, or a tag or digest that cannot be applied, raises
`InvalidReferenceError`. An invalid digest string raises
`InvalidDigestError`. Both are subclasses of `ValueError`.

```python
from imagereloc.imageset import ImageSet

images = ImageSet(["example.com/u/b", "example.com/u/a"])
print(images)           # [example.com/u/a, example.com/u/b]
print(images.to_json()) # ["example.com/u/a","example.com/u/b"]
assert ImageSet.from_json(images.to_json()) == images
```

An empty set encodes as `null`. `from_json` turns `null` into the empty
set. It raises `ValueError` for any other value that is not an array of
strings.

## Command line

Map an image reference to its relocated reference:

```
irel map --repository-prefix registry.example.com/team ubuntu:18.10
```

`-r` is the short form of `--repository-prefix`. If the reference is
invalid, `irel` prints an error to standard error and exits with status 1.

Show the version:

```
irel --version
```

Run without a command, `irel` prints its help.

## What it does not do

The package works only on names, digests and sets of references. It does
not contact a registry, and it has no commands to copy images, fetch their
digests or manage OCI image layouts. `irel` accepts the global options
`--ca-cert-path` and `--skip-tls-verify`, but no command uses them.

## Running the tests

```
pip install .[test]
pytest
```