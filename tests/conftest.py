import pytest

from seo_engine.document import parse_document

PAGE_URL = "https://example.com/guides/organic-gardening"

GOOD_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Organic Gardening Guide for Beginners</title>
  <meta name="description" content="Learn how to plan, plant and care for an organic vegetable garden with simple steps that work in any backyard.">
  <meta property="og:title" content="Organic Gardening Guide">
  <meta property="og:description" content="Plan, plant and care for an organic garden.">
  <meta property="og:image" content="https://example.com/static/garden-share.webp">
  <meta property="og:image:width" content="1200">
  <meta property="og:image:height" content="630">
  <meta property="og:url" content="https://example.com/guides/organic-gardening">
  <meta property="og:type" content="article">
  <meta property="og:site_name" content="Example Gardens">
  <meta property="fb:app_id" content="1234567890">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:site" content="@examplegardens">
  <meta name="twitter:image" content="https://example.com/static/garden-twitter.webp">
  <script>var tracking = "ignore me entirely";</script>
</head>
<body>
  <nav><a href="/">Home</a></nav>
  <h1>Organic Gardening Guide</h1>
  <p>Good soil is the start of every garden. Add compost in the spring and the fall.</p>

  <h2>Choosing plants</h2>
  <p>Pick plants that like your climate. Ask a local nursery for advice.</p>
  <img src="/static/tomato-seedlings.webp" alt="Tomato seedlings in trays" width="640" height="480">
  <img src="/static/raised-bed.webp" alt="Raised garden bed" width="640" height="480">
  <img src="/static/compost-bin.webp" alt="Compost bin" width="640" height="480">

  <h2>Next steps</h2>
  <p>Read our <a href="/guides/composting">composting basics</a>, the
     <a href="/guides/watering">watering schedule</a> and the
     <a href="https://example.com/guides/pests">natural pest control guide</a>.
     The <a href="https://www.rhs.org.uk/">Royal Horticultural Society</a> has more.</p>
  <footer><p>Copyright Example Gardens</p></footer>
</body>
</html>
"""


@pytest.fixture
def page_url():
    return PAGE_URL


@pytest.fixture
def good_page_html():
    return GOOD_PAGE_HTML


@pytest.fixture
def good_document():
    return parse_document(GOOD_PAGE_HTML)


@pytest.fixture
def make_document():
    return parse_document
