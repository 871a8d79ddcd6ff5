# tests/conftest.py
"""
Shared fixtures for screen collator tests
"""
import pytest


SAMPLE_COURSE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<course baseCatalogId="ABC123">
  <page pageid="page000042" type="content" hidden="false">
    <title>Intro</title>
  </page>
  <topic>
    <title>Safety Basics</title>
    <question pageid="adapt_5_1"/>
  </topic>
</course>
"""

FULL_COURSE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<course baseCatalogId="HSE900">
  <module>
    <page pageid="pg_100001" type="content"><title>Welcome</title></page>
    <page pageid="pg_100002" type="video" hidden="true"><title>Hidden Video</title></page>
    <page pageid="pg_100003" type="quiz"><title>Check "Your" Knowledge</title></page>
    <page pageid="pg_100001" type="content"><title>Welcome Again</title></page>
    <page type="content"><title>No Id</title></page>
    <page pageid="pg_100004"><title>No Type</title></page>
  </module>
  <topic>
    <title>Hazard Spotting</title>
    <lesson>
      <landing pageid="adapt_7_1"/>
      <question pageid="adapt_7_2"/>
      <result pageid="adapt_7_3"/>
      <wrapUp pageid="adapt_7_4"/>
    </lesson>
  </topic>
  <topic>
    <title>Ladders</title>
    <landing pageid="adapt_8_1"/>
    <question pageid="adapt_8_1"/>
  </topic>
  <landing pageid="adapt_9_1"/>
  <question pageid="not_adaptive"/>
  <result/>
</course>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_COURSE_XML


@pytest.fixture
def full_xml():
    return FULL_COURSE_XML


@pytest.fixture
def course_file(tmp_path):
    """Course.xml written to a temp dir"""
    path = tmp_path / "Course.xml"
    path.write_text(FULL_COURSE_XML, encoding="utf-8")
    return path
