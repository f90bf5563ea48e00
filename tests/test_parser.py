import logging

from pin_parser import BlueprintParser, PinCategory, PinDirection, PinLink


def test_sample_blueprint_nodes(sample_blueprint):
    parser = BlueprintParser()
    nodes = parser.parse(sample_blueprint)

    assert [n.name for n in nodes] == ["K2Node_CallFunction_0", "K2Node_Event_0"]
    call, event = nodes
    assert call.node_type == "K2Node_CallFunction"
    assert call.guid == "A1B2C3D4E5F60718293A4B5C6D7E8F90"
    assert call.position == (256, -64)
    assert call.comment is None
    assert "FunctionReference" in call.raw_properties

    assert event.guid == "K2Node_Event_0"
    assert event.comment == "Entry point"


def test_sample_blueprint_pins(sample_blueprint):
    call, event = BlueprintParser().parse(sample_blueprint)

    assert [p.name for p in call.pins] == ["execute", "In String", "Print To Screen"]
    assert all(p.node_name == "K2Node_CallFunction_0" for p in call.pins)
    assert call.get_pin("STR_IN").default_value == "Hello, World"
    assert call.get_pin("BOOL_IN").default_value is True
    assert call.get_pin("EXEC_IN").linked_to == [PinLink("K2Node_Event_0", "THEN_OUT")]
    assert call.get_pin("missing") is None

    then = event.get_pin("THEN_OUT")
    assert then.direction is PinDirection.OUTPUT
    assert then.category is PinCategory.EXEC
    assert len(then.linked_to) == 2


def test_sample_blueprint_stats(sample_blueprint):
    parser = BlueprintParser()
    parser.parse(sample_blueprint)
    stats = parser.stats

    assert stats["total_nodes"] == 2
    assert stats["total_pins"] == 4
    assert stats["total_links_found"] == 3
    assert stats["links_resolved"] == 2
    assert stats["links_unresolved"] == 1
    assert stats["node_types"] == {"K2Node_CallFunction": 1, "K2Node_Event": 1}
    assert stats["pin_categories"] == {"exec": 2, "string": 1, "bool": 1}


def test_stats_are_reset_between_runs(sample_blueprint):
    parser = BlueprintParser()
    parser.parse(sample_blueprint)
    parser.parse(sample_blueprint)
    assert parser.stats["total_nodes"] == 2
    assert len(parser.nodes) == 2


def test_nested_objects_are_not_nodes():
    text = """
Begin Object Class=/Script/BlueprintGraph.K2Node_Timeline Name="K2Node_Timeline_0"
   Begin Object Class=/Script/Engine.TimelineTemplate Name="Timeline_0_Template"
      CustomProperties Pin (PinId=INNER,PinName="inner",)
   End Object
   CustomProperties Pin (PinId=PLAY,PinName="Play",PinType.PinCategory="exec",)
End Object
"""
    nodes = BlueprintParser().parse(text)
    assert [n.name for n in nodes] == ["K2Node_Timeline_0"]
    assert [p.id for p in nodes[0].pins] == ["PLAY"]


def test_unclosed_block_is_still_processed(caplog):
    text = """
Begin Object Class=/Script/BlueprintGraph.K2Node_Self Name="K2Node_Self_0"
   CustomProperties Pin (PinId=SELF,PinName="self",Direction="EGPD_Output",PinType.PinCategory="object",)
"""
    with caplog.at_level(logging.WARNING, logger="pin_parser"):
        nodes = BlueprintParser().parse(text)
    assert len(nodes) == 1
    assert nodes[0].pins[0].name == "self"
    assert "unclosed" in caplog.text


def test_objects_without_name_are_skipped(caplog):
    text = """
Begin Object Class=/Script/BlueprintGraph.K2Node_Self
End Object
End Object
"""
    with caplog.at_level(logging.WARNING, logger="pin_parser"):
        assert BlueprintParser().parse(text) == []
    assert "missing Name" in caplog.text
    assert "without matching 'Begin'" in caplog.text


def test_node_to_dict(sample_blueprint):
    data = BlueprintParser().parse(sample_blueprint)[0].to_dict()
    assert data["name"] == "K2Node_CallFunction_0"
    assert data["class"] == "/Script/BlueprintGraph.K2Node_CallFunction"
    assert data["position"] == [256, -64]
    assert len(data["pins"]) == 3
    assert data["pins"][2]["color"] == "rgb(146, 1, 1)"
