from __future__ import annotations

from enum import Enum


class SolrField(str, Enum):
    """Canonical Solr field names.

    Members are plain strings, so they can be used anywhere a field name is
    expected: ``f"{SolrField.AUTH_TEMPLATE}:news"`` renders ``authtemplate:news``.

    Taxonomy fields come in four flavours: the raw id (``TOPICS``), its display
    title (``TOPICS_TITLE``), the hierarchical path (``TOPICS_PATH``) and the
    path of titles (``TOPICS_TITLE_PATH``).
    """

    ID = "id"
    LIBRARY_LOCALE = "documentlibrarylocale"
    LIBRARY_NAME = "documentlibraryname"
    TITLE = "title"
    SHORT_TITLE = "shorttitle"
    NAME = "name"
    DESCRIPTION = "description"
    SUMMARY = "summary"
    ANSWER = "answer"
    QUESTION_TYPE = "questionType"
    LOCATION = "location"

    IMG_CAPTION = "imagecaption"
    THUMB_CAPTION = "thumbnailcaption"
    ICON = "icon"
    THUMBNAIL = "thumbnail"
    IMAGE = "image"
    LINK = "link"
    MORE_INFO = "moreInformation"

    WCM_PATH = "wcmpath"
    WCM_TITLE_PATH = "wcmtitlepath"
    AUTH_TEMPLATE = "authtemplate"
    REFERENCE_URL_NAME = "referenceurlname"

    CONTENT_TYPE = "contenttype"
    CONTENT_TYPE_TITLE = "contenttypetitle"
    CONTENT_TYPE_PATH = "contenttypepath"
    CONTENT_TYPE_PATH_TITLE = "contenttypepathtitle"

    AUDIENCE_COUNTRY = "audiencecountry"
    AUDIENCE_COUNTRY_TITLE = "audiencecountrytitle"
    AUDIENCE_COUNTRY_PATH = "audiencecountrypath"
    AUDIENCE_COUNTRY_PATH_TITLE = "audiencecountrypathtitle"
    AUDIENCE_BRAND = "audiencebrand"
    AUDIENCE_BRAND_TITLE = "audiencebrandtitle"

    RELATED_HUBS = "relatedHubs"
    RELATED_HUBS_TITLE = "relatedHubstitle"
    RELATED_HUBS_PATH = "relatedHubspath"
    RELATED_HUBS_PATH_TITLE = "relatedHubspathtitle"

    TARGET_ROLE = "targetingRole"
    TARGET_ROLE_TITLE = "targetingRoletitle"
    TARGET_ROLE_PATH = "targetingRolepath"
    TARGET_ROLE_PATH_TITLE = "targetingRolepathtitle"

    PORTAL_LOCATION = "portallocation"
    PORTAL_LOCATION_TITLE = "portallocationtitle"
    PORTAL_LOCATION_PATH = "portallocationpath"
    PORTAL_LOCATION_PATH_TITLE = "portallocationpathtitle"

    CATEGORIES = "categories"
    CATEGORIES_TITLE = "categoriestitle"
    CATEGORIES_PATH = "categoriespath"
    CATEGORIES_PATH_TITLE = "categoriespathtitle"

    TOPICS = "topics"
    TOPICS_TITLE = "topicstitle"
    TOPICS_PATH = "topicspath"
    TOPICS_TITLE_PATH = "topicstitlepath"

    PUBLISH_DATE = "publishdate"
    START_DATE = "startDateAndTime"
    END_DATE = "endDateAndTime"

    NAME_SORT = "namesorting"
    TITLE_SORT = "titlesorting"

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)
