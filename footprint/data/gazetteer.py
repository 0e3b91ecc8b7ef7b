"""
gazetteer.py
~~~~~~~~~~~~
Hand-curated reference tables for name resolution.

CITY_COORDINATES maps a bare city name (no 市 suffix) to its
(latitude, longitude) and containing province short name.
PROVINCE_ALIASES maps every accepted spelling of a province-level
division to its canonical short name. Both tables are read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, TypedDict


class CityEntry(TypedDict):
    coordinates: tuple[float, float]
    province: str


_CITIES: dict[str, CityEntry] = {
    # ─── Municipalities ────────────────────────────────────────────────
    "北京": {"coordinates": (39.9042, 116.4074), "province": "北京"},
    "上海": {"coordinates": (31.2304, 121.4737), "province": "上海"},
    "天津": {"coordinates": (39.3434, 117.3616), "province": "天津"},
    "重庆": {"coordinates": (29.5630, 106.5516), "province": "重庆"},
    # ─── North ─────────────────────────────────────────────────────────
    "石家庄": {"coordinates": (38.0428, 114.5149), "province": "河北"},
    "唐山": {"coordinates": (39.6309, 118.1802), "province": "河北"},
    "保定": {"coordinates": (38.8739, 115.4646), "province": "河北"},
    "秦皇岛": {"coordinates": (39.9354, 119.6005), "province": "河北"},
    "太原": {"coordinates": (37.8706, 112.5489), "province": "山西"},
    "大同": {"coordinates": (40.0768, 113.3001), "province": "山西"},
    "平遥": {"coordinates": (37.1894, 112.1761), "province": "山西"},
    "呼和浩特": {"coordinates": (40.8424, 111.7492), "province": "内蒙古"},
    "包头": {"coordinates": (40.6574, 109.8403), "province": "内蒙古"},
    # ─── North-east ────────────────────────────────────────────────────
    "沈阳": {"coordinates": (41.8057, 123.4315), "province": "辽宁"},
    "大连": {"coordinates": (38.9140, 121.6147), "province": "辽宁"},
    "长春": {"coordinates": (43.8171, 125.3235), "province": "吉林"},
    "吉林": {"coordinates": (43.8378, 126.5496), "province": "吉林"},
    "哈尔滨": {"coordinates": (45.8038, 126.5350), "province": "黑龙江"},
    # ─── East ──────────────────────────────────────────────────────────
    "南京": {"coordinates": (32.0603, 118.7969), "province": "江苏"},
    "苏州": {"coordinates": (31.2990, 120.5853), "province": "江苏"},
    "无锡": {"coordinates": (31.4912, 120.3119), "province": "江苏"},
    "扬州": {"coordinates": (32.3942, 119.4129), "province": "江苏"},
    "杭州": {"coordinates": (30.2741, 120.1551), "province": "浙江"},
    "宁波": {"coordinates": (29.8683, 121.5440), "province": "浙江"},
    "温州": {"coordinates": (27.9943, 120.6994), "province": "浙江"},
    "绍兴": {"coordinates": (29.9958, 120.5861), "province": "浙江"},
    "合肥": {"coordinates": (31.8206, 117.2272), "province": "安徽"},
    "黄山": {"coordinates": (29.7147, 118.3375), "province": "安徽"},
    "福州": {"coordinates": (26.0745, 119.2965), "province": "福建"},
    "厦门": {"coordinates": (24.4798, 118.0894), "province": "福建"},
    "泉州": {"coordinates": (24.8741, 118.6757), "province": "福建"},
    "南昌": {"coordinates": (28.6820, 115.8579), "province": "江西"},
    "景德镇": {"coordinates": (29.2689, 117.1784), "province": "江西"},
    "济南": {"coordinates": (36.6512, 117.1201), "province": "山东"},
    "青岛": {"coordinates": (36.0671, 120.3826), "province": "山东"},
    "烟台": {"coordinates": (37.4638, 121.4479), "province": "山东"},
    "威海": {"coordinates": (37.5131, 122.1204), "province": "山东"},
    # ─── Central ───────────────────────────────────────────────────────
    "郑州": {"coordinates": (34.7466, 113.6254), "province": "河南"},
    "洛阳": {"coordinates": (34.6197, 112.4540), "province": "河南"},
    "开封": {"coordinates": (34.7973, 114.3076), "province": "河南"},
    "武汉": {"coordinates": (30.5928, 114.3055), "province": "湖北"},
    "宜昌": {"coordinates": (30.6919, 111.2865), "province": "湖北"},
    "长沙": {"coordinates": (28.2282, 112.9388), "province": "湖南"},
    "张家界": {"coordinates": (29.1170, 110.4792), "province": "湖南"},
    # ─── South ─────────────────────────────────────────────────────────
    "广州": {"coordinates": (23.1291, 113.2644), "province": "广东"},
    "深圳": {"coordinates": (22.5431, 114.0579), "province": "广东"},
    "珠海": {"coordinates": (22.2710, 113.5767), "province": "广东"},
    "佛山": {"coordinates": (23.0215, 113.1214), "province": "广东"},
    "汕头": {"coordinates": (23.3541, 116.6820), "province": "广东"},
    "南宁": {"coordinates": (22.8170, 108.3669), "province": "广西"},
    "桂林": {"coordinates": (25.2736, 110.2900), "province": "广西"},
    "北海": {"coordinates": (21.4733, 109.1192), "province": "广西"},
    "海口": {"coordinates": (20.0440, 110.1999), "province": "海南"},
    "三亚": {"coordinates": (18.2528, 109.5119), "province": "海南"},
    # ─── South-west ────────────────────────────────────────────────────
    "成都": {"coordinates": (30.5728, 104.0668), "province": "四川"},
    "乐山": {"coordinates": (29.5521, 103.7656), "province": "四川"},
    "贵阳": {"coordinates": (26.6470, 106.6302), "province": "贵州"},
    "遵义": {"coordinates": (27.7254, 106.9272), "province": "贵州"},
    "昆明": {"coordinates": (25.0389, 102.7183), "province": "云南"},
    "大理": {"coordinates": (25.6065, 100.2676), "province": "云南"},
    "丽江": {"coordinates": (26.8721, 100.2299), "province": "云南"},
    "西双版纳": {"coordinates": (22.0017, 100.7979), "province": "云南"},
    "拉萨": {"coordinates": (29.6520, 91.1721), "province": "西藏"},
    # ─── North-west ────────────────────────────────────────────────────
    "西安": {"coordinates": (34.3416, 108.9398), "province": "陕西"},
    "延安": {"coordinates": (36.5853, 109.4897), "province": "陕西"},
    "兰州": {"coordinates": (36.0611, 103.8343), "province": "甘肃"},
    "敦煌": {"coordinates": (40.1421, 94.6620), "province": "甘肃"},
    "西宁": {"coordinates": (36.6171, 101.7782), "province": "青海"},
    "银川": {"coordinates": (38.4872, 106.2309), "province": "宁夏"},
    "乌鲁木齐": {"coordinates": (43.8256, 87.6168), "province": "新疆"},
    "喀什": {"coordinates": (39.4704, 75.9898), "province": "新疆"},
    # ─── SARs and Taiwan ───────────────────────────────────────────────
    "台北": {"coordinates": (25.0330, 121.5654), "province": "台湾"},
    "高雄": {"coordinates": (22.6273, 120.3014), "province": "台湾"},
}

_PROVINCES: dict[str, str] = {
    # ─── Full official names ───────────────────────────────────────────
    "北京市": "北京",
    "天津市": "天津",
    "上海市": "上海",
    "重庆市": "重庆",
    "河北省": "河北",
    "山西省": "山西",
    "辽宁省": "辽宁",
    "吉林省": "吉林",
    "黑龙江省": "黑龙江",
    "江苏省": "江苏",
    "浙江省": "浙江",
    "安徽省": "安徽",
    "福建省": "福建",
    "江西省": "江西",
    "山东省": "山东",
    "河南省": "河南",
    "湖北省": "湖北",
    "湖南省": "湖南",
    "广东省": "广东",
    "海南省": "海南",
    "四川省": "四川",
    "贵州省": "贵州",
    "云南省": "云南",
    "陕西省": "陕西",
    "甘肃省": "甘肃",
    "青海省": "青海",
    "台湾省": "台湾",
    "内蒙古自治区": "内蒙古",
    "广西壮族自治区": "广西",
    "西藏自治区": "西藏",
    "宁夏回族自治区": "宁夏",
    "新疆维吾尔自治区": "新疆",
    "香港特别行政区": "香港",
    "澳门特别行政区": "澳门",
    # ─── Common abbreviations ──────────────────────────────────────────
    "京": "北京",
    "津": "天津",
    "沪": "上海",
    "渝": "重庆",
    "冀": "河北",
    "晋": "山西",
    "蒙": "内蒙古",
    "辽": "辽宁",
    "黑": "黑龙江",
    "苏": "江苏",
    "浙": "浙江",
    "皖": "安徽",
    "闽": "福建",
    "赣": "江西",
    "鲁": "山东",
    "豫": "河南",
    "鄂": "湖北",
    "湘": "湖南",
    "粤": "广东",
    "桂": "广西",
    "琼": "海南",
    "川": "四川",
    "蜀": "四川",
    "黔": "贵州",
    "滇": "云南",
    "藏": "西藏",
    "陕": "陕西",
    "秦": "陕西",
    "甘": "甘肃",
    "陇": "甘肃",
    "青": "青海",
    "宁": "宁夏",
    "新": "新疆",
    "港": "香港",
    "澳": "澳门",
    "台": "台湾",
    # ─── Informal long forms ───────────────────────────────────────────
    "广西自治区": "广西",
    "宁夏自治区": "宁夏",
    "新疆自治区": "新疆",
    "香港特区": "香港",
    "澳门特区": "澳门",
}

CITY_COORDINATES: Mapping[str, CityEntry] = MappingProxyType(_CITIES)
PROVINCE_ALIASES: Mapping[str, str] = MappingProxyType(_PROVINCES)
