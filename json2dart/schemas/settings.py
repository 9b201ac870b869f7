from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional

Serialization = Literal["json_serializable", "manual", "custom"]
TypeSetting = Literal["auto", "nullable", "non-nullable"]
DefaultValue = Literal["none", "non-null", "null"]
NamingConvention = Literal["camelCase", "snake_case", "PascalCase"]


class CustomAnnotationSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    import_statement: str = Field("", examples=["import 'package:json_annotation/json_annotation.dart';"])
    class_annotation: str = Field("", examples=["@JsonSerializable()"])
    property_annotation: str = Field("", examples=["@JsonKey(name: '%s')"])


class GeneratorSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    serialization: Serialization = "json_serializable"
    type_setting: TypeSetting = "auto"
    default_value: DefaultValue = "none"
    naming_convention: NamingConvention = "camelCase"
    sort: bool = False
    use_json_annotation: bool = False
    custom_settings: Optional[CustomAnnotationSettings] = None
